"""Catalogue of lead-sheet chord quality suffixes.

This is not every suffix the grammar accepts (that set is infinite), but an
exhaustive set for a configurable grammar:
modifiers x extensions x alterations x adds x omits x sus.
Every generated suffix parses.
"""

from __future__ import annotations

from itertools import product

MODIFIERS = [
    "",  # major triad
    "m",
    "maj",
    "dim",
    "aug",
    "+",
    "-",
    "o",
]

# Extension runs, written in increasing degree order
EXTENSIONS = [
    "",
    "5",
    "6",
    "7",
    "9",
    "11",
    "13",
    "7 9",
    "9 13",
    "#11",
    "b13",
]

ALTERATIONS = [
    "",
    "b5",
    "#5",
    "b9",
    "#9",
    "#11",
    "b13",
]

# Allow up to N alterations per suffix
MAX_ALTERATIONS = 2

ADDS = [
    "",
    "add2",
    "add4",
    "add9",
    "add b9",
    "add11",
    "add13",
]

OMITS = [
    "",
    "omit3",
    "omit5",
]

SUS = [
    "",
    "sus2",
    "sus4",
]


def _alteration_combos(alts: list[str], max_k: int) -> list[tuple[str, ...]]:
    """All alteration combinations up to max_k, empty combo first."""
    combos: list[tuple[str, ...]] = [()]
    for k in range(1, max_k + 1):
        for tpl in product(alts, repeat=k):
            # prevent duplicates like ("b9", "b9")
            if len(set(tpl)) != len(tpl):
                continue
            combos.append(tuple(sorted(tpl)))
    return list(dict.fromkeys(combos))


def generate_quality_suffixes(  # noqa: PLR0913
    modifiers: list[str] | None = None,
    extensions: list[str] | None = None,
    alterations: list[str] | None = None,
    adds: list[str] | None = None,
    omits: list[str] | None = None,
    sus: list[str] | None = None,
    max_alterations: int = MAX_ALTERATIONS,
) -> list[str]:
    """Generate chord quality suffix strings.

    Parameters
    ----------
    modifiers, extensions, alterations, adds, omits, sus : list[str] | None
        Override the default values for each axis.
    max_alterations : int
        Maximum number of distinct alterations per suffix.

    Returns
    -------
    list[str]
        Sorted, de-duplicated suffixes.

    Notes
    -----
    Alterations are only combined with an extension run, and only with
    alterations below its top degree, so every alteration reads as one.

    Examples
    --------
    >>> generate_quality_suffixes(
    ...     modifiers=["m"], extensions=["7"], alterations=["b5"],
    ...     adds=[""], omits=[""], sus=[""],
    ... )
    ['m7', 'm7b5']
    """
    modifiers = modifiers if modifiers is not None else MODIFIERS
    extensions = extensions if extensions is not None else EXTENSIONS
    adds = adds if adds is not None else ADDS
    omits = omits if omits is not None else OMITS
    sus = sus if sus is not None else SUS
    alterations = alterations if alterations is not None else ALTERATIONS

    alt_combos = _alteration_combos([a for a in alterations if a], max_alterations)

    out: set[str] = set()
    for mod, ext, alt_tpl, add, omit, sus_ in product(modifiers, extensions, alt_combos, adds, omits, sus):
        if alt_tpl and not ext:
            continue
        if alt_tpl and max(_degree(a) for a in alt_tpl) >= _degree(ext.split()[-1]):
            continue

        parts = [mod, ext.replace(" ", ""), *alt_tpl, add, omit, sus_]
        out.add("".join(p for p in parts if p))

    return sorted(out)


def _degree(text: str) -> int:
    return int(text.lstrip("b#"))
