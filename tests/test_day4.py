import pytest

from aoc import day4

SAMPLE = """
ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753108 byr:1931
hgt:179cm

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in
"""

INVALID_V2 = """
eyr:1972 cid:100
hcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926

iyr:2019
hcl:#602927 eyr:1967 hgt:170cm
ecl:grn pid:012533040 byr:1946
"""

VALID_V2 = """
pid:087499704 hgt:74in ecl:grn iyr:2012 eyr:2030 byr:1980
hcl:#623a2f

eyr:2029 ecl:blu cid:129 byr:1989
iyr:2014 pid:896056539 hcl:#a97842 hgt:165cm
"""


def test_count_valid_sample():
    assert day4.count_valid(SAMPLE) == (2, 2)


def test_count_valid_field_rules():
    assert day4.count_valid(INVALID_V2) == (2, 0)
    assert day4.count_valid(VALID_V2) == (2, 2)


def test_height():
    assert day4.parse_height("60in") == (60, "in")
    assert day4.parse_height("190cm") == (190, "cm")
    for bad in ("190in", "190", "58in", "194cm"):
        with pytest.raises(ValueError):
            day4.parse_height(bad)


def test_field_validators():
    assert day4.parse_num_range("2002", 1920, 2002) == 2002
    with pytest.raises(ValueError):
        day4.parse_num_range("2003", 1920, 2002)

    assert day4.parse_hair_color("#123abc") == "#123abc"
    for bad in ("#123abz", "123abc"):
        with pytest.raises(ValueError):
            day4.parse_hair_color(bad)

    assert day4.parse_eye_color("brn") == "brn"
    with pytest.raises(ValueError):
        day4.parse_eye_color("wat")

    assert day4.parse_passport_id("000000001") == "000000001"
    with pytest.raises(ValueError):
        day4.parse_passport_id("0123456789")


def test_unknown_field_is_input_error():
    with pytest.raises(ValueError, match="Invalid field name"):
        day4.parse_raw("byr:1937 foo:bar")
    with pytest.raises(ValueError, match="Invalid field"):
        day4.parse_raw("byr:1937:2")


def test_run_sample(write_input):
    assert day4.run([write_input(SAMPLE)]) == (2, 2)
