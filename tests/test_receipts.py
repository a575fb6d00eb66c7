import json

from aoc.receipts import (
    append_receipt,
    build_answer_receipt,
    find_receipt,
    read_receipts,
    sha256_bytes,
)


def test_sha256_bytes_known_digest():
    assert sha256_bytes(b"") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_build_answer_receipt_fields():
    receipt = build_answer_receipt(
        day="day1",
        input_path="in.txt",
        input_sha256="abc",
        part1=514579,
        part2=(1, 2),
        elapsed_s=0.1234567891,
    )

    assert receipt == {
        "day": "day1",
        "input_path": "in.txt",
        "input_sha256": "abc",
        "part1": 514579,
        "part2": "(1, 2)",
        "elapsed_s": 0.123457,
    }


def test_append_receipt_accumulates_and_find_returns_latest(tmp_path):
    path = tmp_path / "out" / "receipts.jsonl"

    append_receipt(path, {"day": "day1", "part1": 1})
    append_receipt(path, {"day": "day2", "part1": 2})
    append_receipt(path, {"day": "day1", "part1": 3})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["part1"] for line in lines] == [1, 2, 3]
    assert len(read_receipts(path)) == 3
    assert find_receipt(path, "day1")["part1"] == 3
    assert find_receipt(path, "day9") is None


def test_append_receipt_sorts_keys(tmp_path):
    path = tmp_path / "receipts.jsonl"

    append_receipt(path, {"part2": 2, "day": "day3", "part1": 1})

    assert path.read_text(encoding="utf-8") == '{"day": "day3", "part1": 1, "part2": 2}\n'


def test_read_receipts_skips_blank_lines(tmp_path):
    path = tmp_path / "receipts.jsonl"
    path.write_text('{"day": "day1"}\n\n{"day": "day2"}\n', encoding="utf-8")

    assert [r["day"] for r in read_receipts(path)] == ["day1", "day2"]
