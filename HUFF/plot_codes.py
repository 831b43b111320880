import argparse
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from freq_table import count_file
from huffman import build_code_table, build_codebook

def plot_code_table(freqs, codes, out_path):
    syms = np.flatnonzero(np.asarray(freqs))
    f = np.asarray(freqs)[syms]
    lengths = np.array([len(codes.get(int(s), "")) for s in syms])
    x = np.arange(len(syms))

    fig, axes = plt.subplots(2, 1, figsize=(10, 5), sharex=True)
    axes[0].bar(x, f, color="tab:blue")
    axes[0].set_ylabel("frequency")
    axes[0].set_title("Symbol frequency / code length", fontsize=9)
    axes[1].bar(x, lengths, color="tab:orange")
    axes[1].set_ylabel("code length (bits)")
    axes[1].set_xticks(x)
    axes[1].set_xticklabels([f"0x{int(s):02x}" for s in syms], rotation=90, fontsize=6)

    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("input", help="file to analyse")
    ap.add_argument("--output", default="fig_codes.png", help="output .png")
    args = ap.parse_args(argv)

    freqs, _ = count_file(args.input)
    leaves, _ = build_code_table(freqs)
    plot_code_table(freqs, build_codebook(leaves), args.output)
    print(f"[plot_codes] wrote {args.output}")

if __name__ == "__main__":
    main()
