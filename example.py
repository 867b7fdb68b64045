#!/usr/bin/env python3
"""
Example usage of the Automerge converter.

Converts a JSON structure to an Automerge document on disk, checks the
bytes and reads the document back as JSON.
"""

import asyncio
import json
import tempfile
from pathlib import Path
from automerge_converter import AutomergeConverter, ConversionOptions, ValidationError


async def main():
    """Main example function."""
    print("Automerge Converter Example")
    print("=" * 50)

    sample_data = {
        "title": "Shopping list",
        "owner": {"name": "Alice Johnson", "email": "alice@example.com"},
        "items": [
            {"name": "apples", "quantity": 6, "done": False},
            {"name": "bread", "quantity": 1, "done": True},
        ],
        "notes": None,
    }

    converter = AutomergeConverter()
    options = ConversionOptions(
        actor="0123456789abcdef0123456789abcdef",
        validate_json=True,
    )

    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "shopping.automerge"

        written = await converter.write_json_as_automerge(sample_data, path, options)
        print(f"✅ Wrote {written} bytes to {path.name}")

        binary = path.read_bytes()
        print(f"🔍 Valid document: {converter.validate_automerge_binary(binary)}")
        print(f"🔁 Repo compatible: {converter.check_repo_compatibility(binary)}")

        restored = await converter.read_automerge_as_json(path, options)
        print("📄 Restored JSON:")
        print(json.dumps(restored, indent=2, ensure_ascii=False))
        print(f"✅ Round trip equal: {restored == sample_data}")

    try:
        converter.json_to_automerge({"callback": print}, options)
    except ValidationError as e:
        print(f"❌ Rejected non-JSON input: {e}")


if __name__ == "__main__":
    asyncio.run(main())
