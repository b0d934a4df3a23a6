"""
Fetch, create and delete Neo4j nodes with callbacks.

Usage:
    export THEO_URL="http://localhost:7474/db/data/node"
    export THEO_USERNAME="neo4j"
    export THEO_PASSWORD="secret"
    python examples/get_node.py
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from theo_sdk import ClientConfig, TheoRequest


def on_success(data, response):
    print(f"✓ {response.status_code} {response.reason}")
    if data:
        print(f"  {data.decode('utf-8')[:200]}")


def on_error(error, response):
    print(f"✗ {error} (status {response.status_code})")


def main():
    config = ClientConfig.from_env()

    print("=" * 60)
    print("Theo SDK - Node Example")
    print("=" * 60)

    with TheoRequest.from_config(config) as request:
        print("\n[1] Creating node...")
        created = request.post_resource(
            {"name": "example"}, on_success=on_success, on_error=on_error
        ).result()

        node_url = created.response.headers.get("Location")
        if not created.ok or not node_url:
            return 1

    with TheoRequest.from_config(config.model_copy(update={"url": node_url})) as node:
        print("\n[2] Fetching node...")
        node.get_resource(on_success, on_error).result()

        print("\n[3] Deleting node...")
        node.delete_resource(on_success, on_error).result()

    return 0


if __name__ == "__main__":
    sys.exit(main())
