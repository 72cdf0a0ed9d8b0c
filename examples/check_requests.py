"""Check a handful of requests against per-user home directory resources."""

from arnguard.checker import ResourceChecker
from arnguard.config import load_settings

settings = load_settings("examples/arnguard.yaml")
checker = ResourceChecker(settings)

requests = [
    ("arn:aws:s3:::home/${aws:username}/*", "home/alice/notes.txt", {"aws:username": ["alice"]}),
    ("arn:aws:s3:::home/${aws:username}/*", "home/bob/notes.txt", {"aws:username": ["alice"]}),
    ("arn:aws:s3:::home/${aws:username}/*", "home/alice/notes.txt", {"aws:username": [""]}),
    ("arn:aws:s3:::/home/*", "home/alice/notes.txt", None),
]


def main() -> None:
    for arn, target, values in requests:
        decision = checker.check(arn, target, values)
        print(f"{'ALLOW' if decision.allowed else 'DENY '} {arn} {target} ({decision.reason})")
    for bucket in ["home", "homework", "other"]:
        decision = checker.check_bucket("arn:aws:s3:::home*", bucket)
        print(f"{'ALLOW' if decision.allowed else 'DENY '} bucket {bucket} ({decision.reason})")


if __name__ == "__main__":
    main()
