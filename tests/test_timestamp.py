from datetime import datetime

from burbir.timestamp import Timestamp, parse_date, parse_time


def test_parse_date():
    assert parse_date("25/12/2023") == (25, 12, 2023)
    assert parse_date("1/2/2024") == (1, 2, 2024)


def test_parse_time():
    assert parse_time("08:05:59") == (8, 5, 59)


def test_parse_empty_is_zero():
    assert parse_date("") == (0, 0, 0)
    assert parse_time("") == (0, 0, 0)


def test_set_date_and_time():
    ts = Timestamp()
    ts.set_date("14/3/2022")
    ts.set_time("21:07:09")
    assert ts == Timestamp(14, 3, 2022, 21, 7, 9)


def test_to_word_pads_time_only():
    assert Timestamp(1, 2, 2023, 3, 4, 5).to_word() == "1/2/2023 03:04:05"


def test_render_pads_date_and_time():
    assert Timestamp(1, 2, 2023, 3, 4, 5).render() == "01/02/2023 03:04:05"


def test_to_word_round_trip():
    original = Timestamp(30, 11, 2021, 23, 59, 0)
    date_text, time_text = original.to_word().split(" ")
    copy = Timestamp()
    copy.set_date(date_text)
    copy.set_time(time_text)
    assert copy == original


def test_render_round_trip():
    original = Timestamp(9, 6, 1999, 12, 30, 45)
    date_text, time_text = original.render().split(" ")
    assert parse_date(date_text) == (9, 6, 1999)
    assert parse_time(time_text) == (12, 30, 45)


def test_equality_differs_on_any_field():
    base = Timestamp(1, 1, 2020, 1, 1, 1)
    assert base == Timestamp(1, 1, 2020, 1, 1, 1)
    assert not base == Timestamp(1, 1, 2020, 1, 1, 2)


def test_now_is_current():
    before = datetime.now().replace(microsecond=0)
    ts = Timestamp.now()
    after = datetime.now()
    moment = datetime(ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second)
    assert before <= moment <= after