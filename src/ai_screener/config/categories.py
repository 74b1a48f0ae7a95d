"""Static definitions for the three screening categories.

Each category owns a fixed prompt recipe and a fixed display title.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Screening category offered in the UI."""

    GROWTH = "growth"
    DAYTRADE = "daytrade"
    DIVIDEND = "dividend"


class CategoryDefinition(BaseModel):
    """Prompt recipe and display strings for one category."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Heading shown above the results")
    button_label: str = Field(..., description="Label of the action button")
    persona: str = Field(..., description="Role the model is asked to play")
    task: str = Field(..., description="What to look for")
    criteria: list[str] = Field(default_factory=list)
    metric_label_rule: str = Field(..., description="How keyMetricLabel must be filled")
    metric_value_rule: str = Field(..., description="How keyMetricValue must be filled")
    analysis_focus: str = Field(..., description="What the analysis text should explain")


CATEGORY_DEFINITIONS: dict[Category, CategoryDefinition] = {
    Category.GROWTH: CategoryDefinition(
        title="Growth Stocks",
        button_label="Find Growth Stocks",
        persona="Act as an expert financial analyst.",
        task="Find 5 to 10 US stocks that meet the following criteria:",
        criteria=[
            "It is a growth stock with high growth potential over the next 5 years.",
            "Its current P/E (price-to-earnings) ratio is below 20.",
            "The company has strong fundamentals and operates in an industry with a "
            "growing trend.",
        ],
        metric_label_rule='use the value "P/E Ratio"',
        metric_value_rule="the current P/E value (as a string)",
        analysis_focus=(
            "a short, easy to understand analysis of the growth potential over the next "
            "5 years and why this stock is interesting"
        ),
    ),
    Category.DAYTRADE: CategoryDefinition(
        title="Day Trading Stocks",
        button_label="Find Day Trade Stocks",
        persona="Act as a market analyst who specializes in short-term trading.",
        task=(
            "Find 5 to 10 US stocks that are currently interesting for day trading, "
            "considering factors such as unusual volume, high volatility, or important "
            "recent news."
        ),
        metric_label_rule=(
            "the name of the single most interesting metric that makes this stock "
            "attractive (e.g. 'Volume', 'Volatility (ATR)', '% Change')"
        ),
        metric_value_rule="the value of that metric (as a string)",
        analysis_focus=(
            "a short analysis of why this stock is interesting for short-term trading "
            "and which risks to watch out for"
        ),
    ),
    Category.DIVIDEND: CategoryDefinition(
        title="Safe Dividend Stocks",
        button_label="Find Dividend Stocks",
        persona="Act as a financial analyst who specializes in income investing.",
        task=(
            "Find 5 to 10 US stocks that are high-safety dividend stocks with the "
            "following characteristics:"
        ),
        criteria=[
            "Consistent dividend payments with a good history of dividend growth.",
            "A strong financial position with low debt and positive cash flow.",
            "A stable, low-volatility industry (e.g. consumer staples, utilities, "
            "healthcare).",
            "Low share price volatility (low beta).",
        ],
        metric_label_rule='use the value "Dividend Yield"',
        metric_value_rule='the current dividend yield (as a string, e.g. "3.8%")',
        analysis_focus=(
            "a short, easy to understand analysis of why this stock is a safe and "
            "attractive dividend investment"
        ),
    ),
}


def get_category_definition(category: Category | str) -> CategoryDefinition:
    """Look up the definition for a category or its string value.

    Raises:
        ValueError: If the value is not one of the known categories
    """
    return CATEGORY_DEFINITIONS[Category(category)]
