import io

import numpy as np
import pytest

from encoder import CAVEAT, build_report, compression_ratio, encode_stream
from metrics import entropy, mean_code_length


def freqs_of(data: bytes):
    return np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=256)


def test_encode_stream_writes_codes_in_input_order():
    out = io.StringIO()
    n, bits = encode_stream(io.BytesIO(b"aab"), out, {ord("a"): "1", ord("b"): "0"}, chunk_size=2)
    assert out.getvalue() == "110"
    assert (n, bits) == (3, 3)


def test_encode_stream_single_symbol_emits_zero_bits():
    out = io.StringIO()
    n, bits = encode_stream(io.BytesIO(b"aaaa"), out, {})
    assert out.getvalue() == ""
    assert (n, bits) == (4, 0)


def test_encode_stream_unknown_symbol_is_an_error():
    with pytest.raises(ValueError):
        encode_stream(io.BytesIO(b"abc"), io.StringIO(), {ord("a"): "0", ord("b"): "1"})


def test_compression_ratio():
    assert compression_ratio(48, 3) == 16.0
    assert compression_ratio(64, 0) is None
    assert compression_ratio(0, 0) is None


def test_report_aab():
    report = build_report(freqs_of(b"aab"), {ord("a"): "1", ord("b"): "0"}, 3, 3)
    assert report == (
        "Letter: a -> 2 -> 1\n"
        "Letter: b -> 1 -> 0\n"
        "\n"
        "The input file contained 48 bits.\n"
        "The output file contained 3 bits*.\n"
        "The encoded output file is 16.0000 times smaller than the original.\n"
        + CAVEAT
    )


def test_report_ratio_fixed_precision():
    report = build_report(freqs_of(b"abcd" + b"e" * 10), {}, 14, 30)
    assert "The encoded output file is 7.4667 times smaller than the original.\n" in report


def test_report_single_symbol_is_flagged():
    report = build_report(freqs_of(b"aaaa"), {}, 4, 0)
    assert report.startswith("Letter: a -> 4 -> \n\n")
    assert "The output file contained 0 bits*.\n" in report
    assert "no compression ratio can be computed" in report


def test_report_empty_input_has_no_symbol_lines():
    report = build_report(np.zeros(256, dtype=np.int64), {}, 0, 0)
    assert "Letter:" not in report
    assert report.startswith("\nThe input file contained 0 bits.\n")
    assert "no compression ratio can be computed" in report


def test_metrics():
    uniform = freqs_of(b"abcd")
    assert entropy(uniform) == pytest.approx(2.0)
    assert entropy(np.zeros(256)) == 0.0
    f = freqs_of(b"aab")
    assert mean_code_length(f, {ord("a"): "1", ord("b"): "0"}) == pytest.approx(1.0)
    assert mean_code_length(np.zeros(256), {}) == 0.0
