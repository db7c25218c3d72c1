import sys
import os

# Add project root to PYTHONPATH dynamically
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pkcnic.services.cnic_validation import evaluate_cnic
from pkcnic.utils.cnic import (
    extract_info,
    format_with_dashes,
    format_without_dashes,
    is_valid,
    is_valid_with_dashes,
    is_valid_without_dashes,
)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def inspect(cnic: str):
    print("=" * 80)
    print(f"CNIC: '{cnic}'")

    print("Is Valid:", _yes_no(is_valid(cnic)))
    print("Is Valid with Dashes:", _yes_no(is_valid_with_dashes(cnic)))
    print("Is Valid without Dashes:", _yes_no(is_valid_without_dashes(cnic)))

    result = evaluate_cnic(cnic)
    if result.reason:
        print("Reason:", result.reason)

    print("Formatted with dashes:", format_with_dashes(cnic))
    print("Formatted without dashes:", format_without_dashes(cnic))

    info = extract_info(cnic)
    if info is not None:
        for key, value in info.model_dump().items():
            print(f"  {key}: {value}")

    print("=" * 80)
    print()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tools/inspect_cnic.py <cnic> [<cnic> ...]")
        sys.exit(1)

    for cnic in sys.argv[1:]:
        inspect(cnic)
