#!/usr/bin/env python3
"""
Pipeline performance benchmarks.

Measures throughput and latency of streaming pipeline components.
"""

import asyncio
import json
import time
from typing import Any

from openai_responses.pipeline import EventStream, FrameDecoder, FrameSplitter


def generate_sse_chunks(count: int) -> list[bytes]:
    """Generate mock SSE frames for benchmarking."""
    chunks = []
    for i in range(count):
        data = {
            "type": "response.output_text.delta",
            "sequence_number": i,
            "item_id": "msg_1",
            "output_index": 0,
            "content_index": 0,
            "delta": f"Token{i}",
        }
        chunks.append(f"data: {json.dumps(data)}\n\n".encode())
    chunks.append(b"data: [DONE]\n\n")
    return chunks


def rechunk(chunks: list[bytes], size: int) -> list[bytes]:
    """Cut the concatenated stream into fixed-size network chunks."""
    data = b"".join(chunks)
    return [data[i:i + size] for i in range(0, len(data), size)]


async def byte_stream(chunks: list[bytes]):
    for chunk in chunks:
        yield chunk


async def benchmark_frame_splitter(iterations: int = 1000, chunk_size: int = 64) -> dict[str, Any]:
    """Benchmark frame splitting over small network chunks."""
    chunks = rechunk(generate_sse_chunks(iterations), chunk_size)
    splitter = FrameSplitter(byte_stream(chunks))

    start = time.perf_counter()
    frames = []
    while (frame := await splitter.next_frame()) is not None:
        frames.append(frame)
    elapsed = time.perf_counter() - start

    return {
        "name": f"FrameSplitter (chunk={chunk_size})",
        "iterations": iterations,
        "elapsed_seconds": elapsed,
        "throughput_fps": len(frames) / elapsed,
        "latency_us": (elapsed / len(frames)) * 1_000_000,
    }


async def benchmark_frame_decoder(iterations: int = 1000) -> dict[str, Any]:
    """Benchmark frame decoding into typed events."""
    frames = generate_sse_chunks(iterations)
    decoder = FrameDecoder()

    start = time.perf_counter()
    results = [decoder.decode(frame) for frame in frames]
    elapsed = time.perf_counter() - start

    return {
        "name": "FrameDecoder",
        "iterations": iterations,
        "elapsed_seconds": elapsed,
        "throughput_fps": len(results) / elapsed,
        "latency_us": (elapsed / len(results)) * 1_000_000,
    }


async def benchmark_event_stream(iterations: int = 1000) -> dict[str, Any]:
    """Benchmark the full streaming pipeline."""
    chunks = rechunk(generate_sse_chunks(iterations), 512)

    start = time.perf_counter()
    events = await EventStream(byte_stream(chunks)).collect()
    elapsed = time.perf_counter() - start

    return {
        "name": "EventStream",
        "iterations": iterations,
        "elapsed_seconds": elapsed,
        "throughput_eps": len(events) / elapsed if events else 0,
        "latency_us": (elapsed / len(events)) * 1_000_000 if events else 0,
    }


async def run_benchmarks() -> None:
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("Pipeline Benchmarks")
    print("=" * 60)
    print()

    results = [
        await benchmark_frame_splitter(chunk_size=7),
        await benchmark_frame_splitter(chunk_size=4096),
        await benchmark_frame_decoder(),
        await benchmark_event_stream(),
    ]

    for result in results:
        print(f"{result['name']}:")
        print(f"  Iterations: {result['iterations']}")
        print(f"  Elapsed: {result['elapsed_seconds']:.4f}s")
        if "throughput_fps" in result:
            print(f"  Throughput: {result['throughput_fps']:.0f} frames/sec")
        if "throughput_eps" in result:
            print(f"  Throughput: {result['throughput_eps']:.0f} events/sec")
        print(f"  Latency: {result['latency_us']:.2f} µs/item")
        print()


if __name__ == "__main__":
    asyncio.run(run_benchmarks())
