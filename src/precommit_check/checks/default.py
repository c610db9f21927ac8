from __future__ import annotations
from typing import List, Tuple
from ..models import Check, Mode


# Must pass, in order, before anything else starts.
SEQUENTIAL_CHECKS: List[Check] = [
    Check(name="fmt", command="cargo +nightly fmt", mode=Mode.SEQUENTIAL),
    Check(name="check", command="cargo check", mode=Mode.SEQUENTIAL),
]

CONCURRENT_CHECKS: List[Check] = [
    Check(name="clippy", command="cargo clippy --all-targets -- -D warnings", mode=Mode.CONCURRENT),
    Check(name="machete", command="cargo machete", mode=Mode.CONCURRENT),
    Check(name="deny", command="cargo deny check licenses", mode=Mode.CONCURRENT),
    Check(name="test", command="cargo test", mode=Mode.CONCURRENT),
    Check(name="changelog syntax", command="xmllint --noout CHANGELOG.xml", mode=Mode.CONCURRENT),
    Check(
        name="changelog schema",
        command="xmllint --noout --schema CHANGELOG.xsd CHANGELOG.xml",
        mode=Mode.CONCURRENT,
    ),
]


def default_checks() -> Tuple[List[Check], List[Check]]:
    """Return fresh copies of the fixed (sequential, concurrent) check lists."""
    return list(SEQUENTIAL_CHECKS), list(CONCURRENT_CHECKS)
