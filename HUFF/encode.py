import argparse
import os
import sys

from freq_table import CHUNK_SIZE
from huffman_coder import huffman_coder
from metrics import entropy, mean_code_length

REPORT_NAME = "Encodings_and_SpaceSaving.txt"

def build_parser():
    ap = argparse.ArgumentParser(description="Huffman-encode a file into a '0'/'1' text stream.")
    ap.add_argument("input", help="file to encode")
    ap.add_argument("output", help="path of the encoded '0'/'1' text file")
    ap.add_argument("--report", default=REPORT_NAME, help=f"code table / size report (default {REPORT_NAME})")
    ap.add_argument("--chunk-size", type=int, default=CHUNK_SIZE, help="read size in bytes")
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.chunk_size <= 0:
        print("[encode] --chunk-size must be positive", file=sys.stderr)
        return 2
    if not os.path.isfile(args.input):
        print(f"[encode] cannot find file: {args.input}", file=sys.stderr)
        return 1

    try:
        report, res = huffman_coder(args.input, args.output, chunk_size=args.chunk_size,
                                    report_path=args.report)
    except FileNotFoundError as e:
        print(f"[encode] cannot find file: {e.filename}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[encode] I/O error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"[encode] inconsistent input: {e}", file=sys.stderr)
        return 1

    print(f"[encode] wrote {args.output}")
    print(f"[encode] wrote {args.report}")
    print(f"[encode] symbols={len(res.codes)}, bytes={res.nbytes}, depth={res.depth}")
    print(f"[encode] in_bits={res.in_bits}, out_bits={res.out_bits}")
    if res.ratio is None:
        print("[encode] encoded output is empty (empty input or a single distinct symbol)")
    else:
        print(f"[encode] ratio={res.ratio:.4f}")
    print(f"[encode] entropy={entropy(res.freqs):.4f} bits/sym, "
          f"mean code length={mean_code_length(res.freqs, res.codes):.4f} bits/sym")
    return 0

if __name__ == "__main__":
    sys.exit(main())
