# render.py
# Turns Match results into display text and exportable records.

ELLIPSIS = "..."


def hit_context(match, hit):
    """Returns the (prefix, suffix) context shown around a hit."""
    base = match.base
    indent = match.indent

    pre_start = hit.start - indent
    if pre_start > 0:
        prefix = ELLIPSIS + base[pre_start:hit.start]
    else:
        prefix = base[:hit.start]

    if len(base) - (hit.end + indent) > 0:
        suffix = base[hit.end:hit.end + indent] + ELLIPSIS
    else:
        suffix = base[hit.end:]

    return prefix, suffix


def format_hit(match, hit):
    prefix, suffix = hit_context(match, hit)
    last = hit.end - 1 if hit.length else hit.start
    return (f"hit ({hit.accuracy * 100:g}%, pos {hit.start} to {last}): "
            f"{prefix}<{match.base[hit.start:hit.end]}>{suffix}")


def format_match(match):
    order = "sorted" if match.sorted_by_accuracy else "unsorted"
    lines = [
        f'string = "{match.base}";',
        f'pattern = "{match.pattern}", {len(match.hits)} hits produced ({order})',
    ]
    lines.extend(format_hit(match, hit) for hit in match.hits)
    return "\n".join(lines) + "\n"


def match_to_records(match):
    """One JSON-ready dict per hit, in hit order."""
    records = []
    for hit in match.hits:
        prefix, suffix = hit_context(match, hit)
        records.append({
            "start": hit.start,
            "end": hit.end,
            "length": hit.length,
            "accuracy": hit.accuracy,
            "text": match.base[hit.start:hit.end],
            "prefix": prefix,
            "suffix": suffix,
        })
    return records
