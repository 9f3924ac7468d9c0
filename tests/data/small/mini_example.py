"""A handful of small FASTA files, one per exit code, plain and gzipped."""

import gzip
from pathlib import Path

SMALL_CASES = {
    "valid": (">seq1 first record\nACGTACGTAC\nGTAC\n>seq2\nacgtn\n>seq3\nNNNNNNNNNN\n", 0),
    "valid_crlf": (">seq1\r\nACGT\r\n>seq2\r\nTTTT\r\n", 0),
    "valid_protein": (">sp|P69905|HBA_HUMAN Hemoglobin subunit alpha\nMVLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF\nDLSHGSAQVKGHGKKVADALTNAVAHVDDMPNALSALSDLHAHKL\n", 0),
    "missing_header": ("ACGT\n>seq1\nACGT\n", 1),
    "duplicate_id": (">seq1 a\nACGT\n>seq2\nACGT\n>seq1 b\nACGT\n", 2),
    "gap_character": (">seq1\nACGT-ACGT\n", 4),
    "stop_character": (">seq1\nMVLS*\n", 4),
    "empty_first": (">seq1\n>seq2\nACGT\n", 8),
    "empty_last": (">seq1\nACGT\n>seq2\n", 8),
}


def ensure_small_dataset(root: Path) -> dict:
    """Write every case as `<name>.fa` and `<name>.fa.gz` under `root`.

    Returns a mapping of file path to expected exit code.
    """
    root.mkdir(parents=True, exist_ok=True)
    expected = {}
    for name, (content, code) in SMALL_CASES.items():
        plain = root / f"{name}.fa"
        plain.write_bytes(content.encode("ascii"))
        packed = root / f"{name}.fa.gz"
        with gzip.open(packed, "wb") as fh:
            fh.write(content.encode("ascii"))
        expected[plain] = code
        expected[packed] = code
    return expected
