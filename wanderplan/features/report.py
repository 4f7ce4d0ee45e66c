"""Plain-text (markdown) trip report."""

from wanderplan.features.budget import aggregate_costs_by_category, total_activity_cost
from wanderplan.models.itinerary import DetailedReport, TripItinerary

REPORT_SECTIONS: list[tuple[str, str]] = [
    ("Logistics & Safety", "logistics"),
    ("Packing Tips", "packing_tips"),
    ("Why This Fits You", "why_this_fits"),
    ("Local Etiquette", "local_etiquette"),
]

REPORT_UNAVAILABLE = "Report details are not available for this trip."


def format_money(currency: str, amount: float) -> str:
    """Whole amounts without decimals, others with two."""
    if float(amount).is_integer():
        return f"{currency} {int(amount):,}"
    return f"{currency} {amount:,.2f}"


def render_detailed_report(report: DetailedReport | None) -> str:
    """Markdown for the four report sections, or a 'not available' note."""
    if report is None:
        return f"_{REPORT_UNAVAILABLE}_"

    lines: list[str] = []
    for heading, attr in REPORT_SECTIONS:
        lines.append(f"### {heading}")
        lines.append(getattr(report, attr))
        lines.append("")
    return "\n".join(lines).rstrip()


def render_report_markdown(itinerary: TripItinerary, travelers: int) -> str:
    """Full text report: summary, day-by-day timeline, notes and costs."""
    lines = [
        f"# Trip to {itinerary.destination}",
        "",
        itinerary.summary,
        "",
        f"**Estimated total:** {format_money(itinerary.currency, itinerary.total_estimated_cost)}",
        "",
    ]

    for day in itinerary.days:
        lines.append(f"## Day {day.day_number}: {day.title}")
        for activity in day.activities:
            item = f"- **{activity.time_slot}** {activity.name} ({activity.duration})"
            if activity.location:
                item += f" @ _{activity.location}_"
            if activity.cost_estimate:
                item += f" - {format_money(itinerary.currency, activity.cost_estimate)} pp"
            lines.append(item)
            if activity.description:
                lines.append(f"  - {activity.description}")
            if activity.map_link:
                lines.append(f"  - [View on Google Maps]({activity.map_link})")
        lines.append("")

    lines.append("## Trip Notes")
    lines.append(render_detailed_report(itinerary.detailed_report))
    lines.append("")

    breakdown = aggregate_costs_by_category(itinerary, travelers)
    lines.append(f"## Estimated Costs ({travelers} traveler{'s' if travelers != 1 else ''})")
    if breakdown:
        for item in breakdown:
            lines.append(f"- {item.category}: {format_money(itinerary.currency, item.amount)}")
        total = total_activity_cost(itinerary, travelers)
        lines.append(f"- **Activities total:** {format_money(itinerary.currency, total)}")
    else:
        lines.append("- No cost estimates available.")

    return "\n".join(lines)
