from freq_table import CHUNK_SIZE

# bits charged per input character in the report (fixed-width 16-bit unit)
INPUT_UNIT_BITS = 16

CAVEAT = ("* This would be the amount of bits the output file "
          "would be if it were represented in true binary.\n")

def encode_stream(f_in, f_out, codes, chunk_size: int = CHUNK_SIZE):
    """
    Re-read f_in and write each byte's code as '0'/'1' characters to f_out
    (text mode). An empty codebook means the tree root is a single leaf:
    every byte is then encoded with zero bits.
    Returns:
      nbytes: bytes read
      out_bits: bit characters written
    """
    table = [codes.get(s) for s in range(256)]
    nbytes = 0
    out_bits = 0
    while True:
        chunk = f_in.read(chunk_size)
        if not chunk:
            break
        nbytes += len(chunk)
        if not codes:
            continue
        parts = []
        for b in chunk:
            code = table[b]
            if code is None:
                raise ValueError(f"symbol {b} has no assigned code (input changed since the frequency scan?)")
            parts.append(code)
        s = "".join(parts)
        f_out.write(s)
        out_bits += len(s)
    return nbytes, out_bits

def compression_ratio(in_bits: int, out_bits: int):
    if out_bits == 0:
        return None
    return in_bits / out_bits

def report_lines(freqs, codes):
    for sym, f in enumerate(freqs):
        if f != 0:
            yield f"Letter: {chr(sym)} -> {int(f)} -> {codes.get(sym, '')}\n"

def build_report(freqs, codes, nbytes: int, out_bits: int) -> str:
    in_bits = nbytes * INPUT_UNIT_BITS
    ratio = compression_ratio(in_bits, out_bits)
    out = list(report_lines(freqs, codes))
    out.append(f"\nThe input file contained {in_bits} bits.\n")
    out.append(f"The output file contained {out_bits} bits*.\n")
    if ratio is None:
        out.append("The encoded output file is empty; no compression ratio can be computed.\n")
    else:
        out.append(f"The encoded output file is {ratio:.4f} times smaller than the original.\n")
    out.append(CAVEAT)
    return "".join(out)
