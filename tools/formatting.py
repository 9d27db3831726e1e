def fmt_amount(x):
    """5000.0 -> '5000', 2500.5 -> '2500.5'."""
    try:
        x = float(x)
    except (TypeError, ValueError):
        return "-"
    if x.is_integer():
        return str(int(x))
    return f"{x:.2f}".rstrip("0").rstrip(".")

def fmt_eur(x):
    amount = fmt_amount(x)
    return amount if amount == "-" else f"€{amount}"
