from ai_screener.config.categories import Category, get_category_definition

FIELD_INSTRUCTIONS_HEADER = "For each stock, provide the data according to the given schema:"
RESPONSE_INSTRUCTION = (
    "Return the result only as valid JSON that follows the given schema, "
    "and make sure that every analysis is written in {language}."
)


def build_prompt(category: Category | str, *, language: str = "English") -> str:
    """Build the natural-language instruction sent to the model for a category.

    Args:
        category: One of the fixed screening categories
        language: Language the analysis text must be written in

    Returns:
        Plain-text prompt, one instruction per line
    """
    definition = get_category_definition(category)

    lines = [definition.persona, definition.task]
    lines.extend(f"{i}. {criterion}" for i, criterion in enumerate(definition.criteria, 1))
    lines.append("")
    lines.append(FIELD_INSTRUCTIONS_HEADER)
    lines.extend(
        [
            "- ticker: the stock ticker symbol",
            "- companyName: the full company name",
            f"- keyMetricLabel: {definition.metric_label_rule}",
            f"- keyMetricValue: {definition.metric_value_rule}",
            f"- analysis: {definition.analysis_focus}",
        ]
    )
    lines.append("")
    lines.append(RESPONSE_INSTRUCTION.format(language=language))
    return "\n".join(lines)
