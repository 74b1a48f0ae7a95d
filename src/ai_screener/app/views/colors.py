# Static color palette of the page


class Colors:
    # Primary (Indigo, used for tickers)
    indigo = "#6366f1"

    # Semantic: valuation metrics (Emerald)
    green = "#34d399"

    # Semantic: income metrics (Sky)
    sky = "#38bdf8"

    # Semantic: everything else (Amber instead of Yellow, stays readable on dark cards)
    amber = "#fbbf24"


# Accent of the key metric value on a card, by accent name from the logic layer
METRIC_ACCENT_COLORS = {
    "pe": Colors.green,
    "dividend": Colors.sky,
    "default": Colors.amber,
}
