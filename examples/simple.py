import sys

from chord_quality import format_quality, parse_quality, try_parse_quality

members = parse_quality("maj7#11 add9 omit5")

# Inspect members in parse order
for member in members:
    sys.stdout.write(f"{member.kind}: {member.to_dict()}\n")

# Canonical spelling
sys.stdout.write(format_quality(members) + "\n")  # "maj7#11add9omit5"

# Malformed suffixes fail as a whole
if try_parse_quality("sus3") is None:
    sys.stdout.write("sus3 is not a valid quality\n")
