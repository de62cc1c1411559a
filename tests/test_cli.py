from dojodraw.cli import main
from dojodraw.models import load_event_config
from dojodraw.utils import set_log_level


def test_groups_with_sample_roster(capsys):
    assert main(["groups", "--sample"]) == 0

    out = capsys.readouterr().out
    assert "Youth Female Kata (3)" in out
    assert "Senior Male Kumite Heavy (1)" in out
    assert "not in any group" not in out


def test_brackets_with_seed(capsys):
    assert main(["brackets", "--sample", "--seed", "7"]) == 0

    out = capsys.readouterr().out
    assert "Junior Female Kumite Heavy (2 entrants, 1 rounds)" in out
    assert "Walkover: Thomas Anderson" in out
    # Kata groups are not drawn
    assert "Youth Female Kata" not in out


def test_brackets_are_reproducible(capsys):
    main(["brackets", "--sample", "--seed", "11"])
    first = capsys.readouterr().out
    main(["brackets", "--sample", "--seed", "11"])
    second = capsys.readouterr().out

    assert first == second


def test_reads_entrant_file_and_reports_skipped_rows(tmp_path, capsys):
    path = tmp_path / "entrants.csv"
    path.write_text(
        "Name,Age,Sex,Weight,Category\n"
        "A,10,M,30,Kumite\nB,10,M,31,Kumite\nC,10,M,32,Kumite\n"
        "D,abc,M,30,Kumite\n",
        encoding="utf-8",
    )

    assert main(["brackets", str(path), "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Row 5 skipped" in out
    assert "Children Male Kumite Light (3 entrants, 2 rounds)" in out
    assert "(bye)" in out


def test_init_config_writes_loadable_file(tmp_path, capsys):
    path = tmp_path / "event.json"

    assert main(["init-config", str(path)]) == 0

    assert len(load_event_config(path).age_bands) == 5


def test_uses_config_file(tmp_path, capsys):
    config = tmp_path / "event.json"
    config.write_text(
        '{"age_bands": [{"name": "Open", "min_age": 0, "max_age": 99}],'
        ' "weight_bands": []}',
        encoding="utf-8",
    )

    assert main(["groups", "--sample", "--config", str(config)]) == 0

    out = capsys.readouterr().out
    assert "Open Male Kata (3)" in out
    assert "9 entrant(s) not in any group" in out


def test_missing_input_is_an_error():
    assert main(["groups"]) == 1


def test_unreadable_file_is_an_error(tmp_path):
    assert main(["groups", str(tmp_path / "missing.csv")]) == 1


def test_init_config_into_missing_directory(tmp_path):
    assert main(["init-config", str(tmp_path / "nowhere" / "event.json")]) == 1


def test_short_verbose_flag(capsys):
    try:
        assert main(["-v", "groups", "--sample"]) == 0
    finally:
        set_log_level("WARNING")
    assert "Youth Female Kata (3)" in capsys.readouterr().out
