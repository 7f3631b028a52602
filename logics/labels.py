def column_labels(headers):
    """
    Derive the canonical label of every column, in header order.

    An empty header becomes "Column <n>" (1-based). A label already taken by an
    earlier column gets the column number appended, e.g. a second "Age" in the
    fourth column becomes "Age (4)", so labels are always unique.

    Args:
        headers: sequence of raw header strings.

    Returns:
        list of label strings, same length as headers.
    """
    labels = []
    seen = set()
    for idx, header in enumerate(headers):
        base = header if header else f"Column {idx + 1}"
        label = base
        suffix = idx + 1
        while label in seen:
            label = f"{base} ({suffix})"
            suffix += 1
        seen.add(label)
        labels.append(label)
    return labels
