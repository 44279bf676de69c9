#!/usr/bin/env python3
"""
Streaming response example.

This example demonstrates how to stream a response event by event
for real-time output.

Usage:
    export OPENAI_API_KEY="your-api-key"
    python examples/streaming.py
"""

import asyncio

from openai_responses import (
    DecodeError,
    ResponseCreateParams,
    ResponsesClient,
)


async def main() -> None:
    """Run streaming example."""
    async with ResponsesClient() as client:
        print("Streaming response:\n")
        print("-" * 50)

        params = ResponseCreateParams(
            model="gpt-4o",
            instructions="You are a creative storyteller.",
            input="Tell me a very short story about a robot learning to paint.",
            max_output_tokens=500,
        )

        stream = await client.create_response_stream(params)
        async with stream:
            try:
                async for event in stream:
                    if event.type == "response.output_text.delta":
                        # Print content as it arrives
                        print(event.delta, end="", flush=True)
                    elif event.type == "response.completed":
                        usage = event.response.usage
                        if usage is not None:
                            print(f"\n\n[Completed: {usage.total_tokens} tokens]")
                    elif event.type == "error":
                        print(f"\n\n[Error: {event.message}]")
            except DecodeError as e:
                print(f"\n\n[Undecodable event at '{e.path}': {e.detail}]")

        print("-" * 50)
        print(f"Stream state: {stream.state.value}, events: {stream.events_yielded}")

        # Replaying a stored response
        created = await client.create_response(
            ResponseCreateParams(model="gpt-4o", input="Count from 1 to 5.", store=True)
        )
        print(f"\n\nStored response {created.id}: {created.text_content}")

        async with await client.retrieve_response_stream(created.id) as replay:
            events = await replay.collect()
        print(f"Replayed {len(events)} events")

        await client.delete_response(created.id)


if __name__ == "__main__":
    asyncio.run(main())
