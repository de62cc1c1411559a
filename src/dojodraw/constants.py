# Dojo Draw
# Copyright (C) 2025  Dojo Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
CSV_EXTENSIONS = (".csv", ".txt")
EXCEL_EXTENSIONS = (".xlsx", ".xlsm")

# Competition categories
CATEGORY_KATA = "Kata"
CATEGORY_KUMITE = "Kumite"

# Sex codes and their display labels
SEX_MALE = "M"
SEX_FEMALE = "F"
SEX_LABELS = {
    SEX_MALE: "Male",
    SEX_FEMALE: "Female",
}
# Fixed order in which Kata groups are emitted per age band
SEX_ORDER = (SEX_MALE, SEX_FEMALE)

# Bye handling
BYE_POLICY_SHALLOW = "shallow"
BYE_POLICY_CASCADE = "cascade"
DEFAULT_BYE_POLICY = BYE_POLICY_SHALLOW

# Kata scoresheets are laid out for a panel of five judges
DEFAULT_KATA_JUDGES = 5

DEFAULT_EVENT_NAME = "Karate Championship"

# Default age bands: (name, min_age, max_age)
DEFAULT_AGE_BANDS = [
    ("Children", 8, 11),
    ("Youth", 12, 14),
    ("Junior", 15, 17),
    ("Senior", 18, 34),
    ("Master", 35, 100),
]

# Default weight bands: (name, min_weight, max_weight, sex)
DEFAULT_WEIGHT_BANDS = [
    ("Light", 0.0, 45.0, SEX_MALE),
    ("Medium", 45.1, 60.0, SEX_MALE),
    ("Heavy", 60.1, 75.0, SEX_MALE),
    ("Super Heavy", 75.1, 200.0, SEX_MALE),
    ("Light", 0.0, 40.0, SEX_FEMALE),
    ("Medium", 40.1, 55.0, SEX_FEMALE),
    ("Heavy", 55.1, 70.0, SEX_FEMALE),
    ("Super Heavy", 70.1, 200.0, SEX_FEMALE),
]

# Accepted column headers for entrant imports (matched case-insensitively)
NAME_HEADERS = ("name", "participant", "competitor")
AGE_HEADERS = ("age",)
SEX_HEADERS = ("sex", "gender")
WEIGHT_HEADERS = ("weight",)
CATEGORY_HEADERS = ("category", "event")
DOB_HEADERS = ("date of birth", "date_of_birth", "dob", "birthdate")

# Plausibility limits applied by the entrant-list provider
MAX_AGE = 120
MAX_WEIGHT = 300.0

# Round titles used on printed brackets, counted back from the final
ROUND_TITLES_FROM_FINAL = ("Final", "Semi-Finals", "Quarter-Finals")
