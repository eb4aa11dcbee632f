# scripts/split_groups.py
"""
Split a file of participant names (one per line) into groups. Run from project root:
    python scripts/split_groups.py names.txt --size 3
    python scripts/split_groups.py names.txt --groups 4 --seed 7
"""
import argparse
import sys

from groupsplit.config.logging import configure_logging
from groupsplit.domain.grouping import GroupingOptions, InvalidInput, SizingDirective
from groupsplit.services.group_service import GroupService


def main(argv=None):
    parser = argparse.ArgumentParser(description="Randomly split participants into groups")
    parser.add_argument("names_file")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--size", type=int, help="people per group")
    mode.add_argument("--groups", type=int, help="number of groups")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default=None, help="e.g. DEBUG; logging stays off when omitted")
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(args.log_level)

    with open(args.names_file, encoding="utf-8") as f:
        participants = GroupService.parse_participants(f.read())

    if args.size is not None:
        directive = SizingDirective.fixed(args.size)
    else:
        directive = SizingDirective.target(args.groups)

    service = GroupService()
    try:
        result = service.generate(
            GroupingOptions(participants=participants, directive=directive, random_seed=args.seed)
        )
    except InvalidInput as e:
        print(f"Invalid input: {e.reason}", file=sys.stderr)
        return 1

    print(service.export_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
