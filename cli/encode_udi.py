#!/usr/bin/env python3
"""
Simple CLI for encoding HIBC UDI labels from a JSON object of fields.

Usage:
    python encode_udi.py '{"lic": "A123", "pcn": "BJC5D6E71G", "unit_of_measure": 1, "lot": "3C001"}'

The optional "structure" key selects primary, secondary or combined
(default: combined).

Output:
    Clean JSON with human-readable field names
"""

import sys
import json
from pathlib import Path

# Add parent directory to path to import hibc_udi
sys.path.insert(0, str(Path(__file__).parent.parent))

from hibc_udi import HIBCError, encode_udi_to_json


def main(argv=None):
    """Main CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Usage: python encode_udi.py <json_fields>")
        print("\nExample:")
        print('  python encode_udi.py \'{"lic": "A123", "pcn": "BJC5D6E71G", "unit_of_measure": 1, "lot": "3C001"}\'')
        sys.exit(1)

    raw_fields = argv[0]

    try:
        fields = json.loads(raw_fields)
        if not isinstance(fields, dict):
            raise ValueError("Expected a JSON object of label fields")
        structure = fields.pop("structure", "combined")
        print(encode_udi_to_json(structure, **fields))

    except (HIBCError, ValueError, TypeError) as e:
        # Output error as JSON for consistency
        error_output = {
            "error": str(e),
            "input": raw_fields
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        sys.exit(1)


if __name__ == "__main__":
    main()
