import os
import tempfile
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
from freq_table import CHUNK_SIZE, count_file
from huffman import Node, build_code_table, build_codebook, tree_depth
from encoder import INPUT_UNIT_BITS, build_report, compression_ratio, encode_stream

@dataclass
class CoderResult:
    freqs: np.ndarray
    codes: Dict[int, str]
    root: Node
    nbytes: int
    out_bits: int

    @property
    def in_bits(self) -> int:
        return self.nbytes * INPUT_UNIT_BITS

    @property
    def ratio(self) -> Optional[float]:
        return compression_ratio(self.in_bits, self.out_bits)

    @property
    def depth(self) -> int:
        return tree_depth(self.root)

def _umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask

def _mkstemp_for(path, pending):
    # stage next to the target; mkstemp creates 0600, use what open() would give
    d = os.path.dirname(os.path.abspath(path))
    fd, tmp = tempfile.mkstemp(prefix=".huff-", suffix=".tmp", dir=d)
    pending.append(tmp)
    try:
        os.chmod(tmp, 0o666 & ~_umask())
    except BaseException:
        os.close(fd)
        raise
    return fd

def huffman_coder(input_path, output_path, chunk_size: int = CHUNK_SIZE, report_path=None):
    """
    Encode input_path into output_path as a '0'/'1' text stream and, when
    report_path is given, write the report there. Nothing is moved into place
    unless the whole run succeeds.
    Returns:
      report: code table + size summary text
      result: CoderResult
    """
    freqs, nbytes = count_file(input_path, chunk_size)
    leaves, root = build_code_table(freqs)
    codes = build_codebook(leaves)

    pending = []
    try:
        fd = _mkstemp_for(output_path, pending)
        with os.fdopen(fd, "w", encoding="ascii", newline="") as fo, open(input_path, "rb") as fi:
            nbytes2, out_bits = encode_stream(fi, fo, codes, chunk_size)
        if nbytes2 != nbytes:
            raise ValueError(f"input size changed between passes ({nbytes} -> {nbytes2} bytes)")

        report = build_report(freqs, codes, nbytes, out_bits)
        if report_path is not None:
            fd = _mkstemp_for(report_path, pending)
            with os.fdopen(fd, "w", encoding="latin-1", newline="") as f:
                f.write(report)
            os.replace(pending[1], report_path)
        os.replace(pending[0], output_path)
    except BaseException:
        for tmp in pending:
            if os.path.exists(tmp):
                os.unlink(tmp)
        raise

    return report, CoderResult(freqs=freqs, codes=codes, root=root, nbytes=nbytes, out_bits=out_bits)
