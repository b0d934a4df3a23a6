"""
Concurrent GET requests with asyncio.

Usage:
    export THEO_URL="http://localhost:7474/db/data/"
    python examples/async_get.py
"""

import sys
import os
import asyncio

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from theo_sdk import AsyncTheoRequest, ClientConfig


async def main():
    config = ClientConfig.from_env()

    async with AsyncTheoRequest.from_config(config) as request:
        results = await asyncio.gather(*(request.get_resource() for _ in range(3)))

    for result in results:
        print(f"{result.status_code} ok={result.ok} errors={[str(e) for e in result.errors]}")


if __name__ == "__main__":
    asyncio.run(main())
