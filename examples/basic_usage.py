"""
Demo script for the GMN check character library

Shows verification, completion and diagnostics, including inputs that are
rejected with a GMNFormatError.
"""

from gs1_gmn import (
    add_check_characters,
    check_characters,
    check_characters_gcp_model,
    good_character_positions,
    verify_check_characters,
    GMNFormatError,
)


def show_verify(gmn):
    """Verify a complete GMN and print the outcome."""
    try:
        valid = verify_check_characters(gmn)
        status = "[OK] correct" if valid else "[!!] incorrect"
        print(f"  {gmn:28} {status} check characters")
    except GMNFormatError as e:
        print(f"  {gmn:28} [{e.kind.value}] {e}")


def show_complete(part):
    """Complete a partial GMN and print the outcome."""
    try:
        print(f"  {part:28} -> {add_check_characters(part)}")
    except GMNFormatError as e:
        print(f"  {part:28} [{e.kind.value}] {e}")


def show_positions(gmn, complete=True):
    """Mark each character that is not allowed at its position."""
    good = good_character_positions(gmn, complete)
    markers = "".join(" " if ok else "^" for ok in good)
    print(f"  {gmn}")
    print(f"  {markers}")


def main():
    print("=" * 80)
    print("  Verifying complete GMNs")
    print("=" * 80)
    show_verify("1987654Ad4X4bL5ttr2310c2K")   # Example from the Gen Specs
    show_verify("1987654Ad4X4bL5ttr2310cZZ")   # Bad check characters
    show_verify("1987654Ad4X4bL5ttr2310c2KZ")  # Too long
    show_verify("12345AB")                     # Too short
    show_verify("ABC7654Ad4X4bL5ttr2310cZZ")   # Doesn't start with five digits
    show_verify("12345£££d4X4bL5ttr2310cZZ")   # Outside of CSET 82

    print()
    print("=" * 80)
    print("  Completing partial GMNs")
    print("=" * 80)
    show_complete("1987654Ad4X4bL5ttr2310c")
    show_complete("12345A")
    show_complete("12345")

    part = "1987654Ad4X4bL5ttr2310c"
    print()
    print(f"  Check characters only: {check_characters(part)}")
    print(f"  From GCP and model:    {check_characters_gcp_model('1987654', 'Ad4X4bL5ttr2310c')}")

    print()
    print("=" * 80)
    print("  Character position diagnostics")
    print("=" * 80)
    show_positions("1987X54Ad4X4bL5ttr2310£2x")


if __name__ == "__main__":
    main()
