#!/usr/bin/env python3
"""Benchmark document upload: throughput (docs/s) and latency.

Usage:
  With the API running locally (DOCUMENT_STORE=memory is enough):
    export API_URL=http://localhost:8080
    python scripts/bench_upload.py [--num-docs 100] [--content-size 500] [--language es]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark document upload")
    parser.add_argument("--num-docs", type=int, default=50, help="Number of documents to upload")
    parser.add_argument("--content-size", type=int, default=200, help="Approximate content length per doc")
    parser.add_argument("--language", type=str, default="es", help="Language code sent with each upload")
    parser.add_argument("--user-id", type=int, default=1, help="Uploader id sent with each upload")
    parser.add_argument("--output", type=str, default="/results/bench_upload.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8080").rstrip("/")

    content = "x" * args.content_size
    latencies: list[float] = []
    errors = 0
    not_implemented = 0

    print(f"Uploading {args.num_docs} documents (content size ~{args.content_size} chars)...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=120.0) as client:
        for i in range(args.num_docs):
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/documents",
                files={"file": (f"bench_{i}.txt", f"{content} doc_{i}".encode("utf-8"), "text/plain")},
                data={"user_id": str(args.user_id), "language_code": args.language},
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            elif r.status_code == 501:
                not_implemented += 1
                print(f"Store not supported: {r.json().get('error')}")
                break
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful uploads.")
        return 1

    docs_per_sec = n / total_elapsed
    total_bytes = n * (args.content_size + 10)
    mb_per_sec = (total_bytes / 1_000_000) / total_elapsed if total_elapsed else 0
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Upload benchmark (n={n}, errors={errors}, not_implemented={not_implemented})\n"
        f"  Throughput: {docs_per_sec:.2f} docs/s, ~{mb_per_sec:.4f} MB/s (text)\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
