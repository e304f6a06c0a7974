"""
Demo: HIBC UDI Encoding

Encodes the ANSI/HIBC 2.5 - 2015 Appendix F sample product in every data
structure and prints the labels.
"""

from hibc_udi import (
    DateFormat,
    QuantityFormat,
    barcodify,
    create_combined_data_structure,
    create_primary_data_structure,
    create_secondary_data_structure,
    encode_udi_to_json,
)


IDENTITY = {"lic": "A123", "pcn": "BJC5D6E71G", "unit_of_measure": 1}


def demo_data_structures():
    """Demonstrate primary, secondary and combined data structures."""

    print("=" * 80)
    print("  HIBC DATA STRUCTURES DEMO")
    print("=" * 80)

    primary = create_primary_data_structure(**IDENTITY)
    print(f"\nPrimary:    {primary:45s} {barcodify(primary)}")

    test_cases = [
        ("Lot", {"lot": "3C001"}),
        ("Lot + MMYY expiry", {"lot": "3C001", "exp_date": {"format": DateFormat.MMYY, "value": "0905"}}),
        ("Serial", {"sn": "0001"}),
        ("Lot + serial", {"lot": "3C001", "sn": "0001"}),
        ("Lot + quantity + long expiry + manufacture", {
            "lot": "3C001",
            "quantity": {"format": QuantityFormat.QQQQQ, "value": "12345"},
            "exp_date": {"format": DateFormat.YYYYMMDD, "value": "20200101"},
            "manufacture_date": "20160101",
        }),
    ]

    for title, fields in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        secondary = create_secondary_data_structure(**IDENTITY, **fields)
        combined = create_combined_data_structure(**IDENTITY, **fields)
        print(f"  Secondary: {secondary}")
        print(f"  Combined:  {combined}")
        print(f"  Printed:   {barcodify(combined)}")

    print("\n\n" + "=" * 80)
    print("  JSON OUTPUT EXAMPLE")
    print("=" * 80)
    print(encode_udi_to_json("combined", **IDENTITY, lot="3C001"))


if __name__ == "__main__":
    demo_data_structures()
