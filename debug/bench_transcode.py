#!/usr/bin/env python3
"""Quick transcode throughput benchmark - direct timing only"""
import os
import sys
import time
from pathlib import Path
from tempfile import TemporaryDirectory

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

SIZE_MIB = 64
CHUNK_SIZES = (4096, 8192, 65536, 1 << 20)


def bench_chunk(src: Path, dst: Path, chunk_size: int) -> float:
    from adf2mp3 import transcode

    start = time.perf_counter()
    transcode(src, dst, chunk_size=chunk_size)
    return time.perf_counter() - start


def main():
    print(f"Benchmarking transcode on {SIZE_MIB} MiB of random data...\n")
    with TemporaryDirectory() as tmp:
        src = Path(tmp) / "bench.adf"
        dst = Path(tmp) / "bench.mp3"
        src.write_bytes(os.urandom(SIZE_MIB * 1024 * 1024))
        for chunk_size in CHUNK_SIZES:
            elapsed = bench_chunk(src, dst, chunk_size)
            print(f"  chunk {chunk_size:>8}: {elapsed:.3f}s ({SIZE_MIB / elapsed:.1f} MiB/s)")

    print("\n✅ Benchmark complete")


if __name__ == '__main__':
    main()
