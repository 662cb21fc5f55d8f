"""
Range Projection Chart Component

Horizontal bar from min to max hit with min/avg/max markers, drawn with
Plotly so it can be shown via st.plotly_chart().
"""

import plotly.graph_objects as go

from tibia_core import ComputationResult

DAMAGE_COLOR = "rgba(244, 63, 94, 0.85)"    # rose
HEALING_COLOR = "rgba(16, 185, 129, 0.85)"  # emerald
AVG_COLOR = "#f59e0b"                       # amber


def create_range_chart(
    result: ComputationResult,
    healing: bool = False,
    height: int = 180,
) -> go.Figure:
    """
    Create the min-max range chart for a result.

    Args:
        result: ComputationResult from either calculator
        healing: Use healing colors and labels
        height: Figure height in pixels

    Returns:
        Plotly Figure object ready for display with st.plotly_chart()
    """
    bar_color = HEALING_COLOR if healing else DAMAGE_COLOR
    noun = "Heal" if healing else "Hit"

    fig = go.Figure()

    # Range bar starts at min and is spread wide
    fig.add_trace(go.Bar(
        x=[result.spread],
        y=["Range"],
        base=[result.min],
        orientation="h",
        marker=dict(color=bar_color),
        hovertemplate=f"Min {noun}: {result.min}<br>Max {noun}: {result.max}<extra></extra>",
        name="Range",
        showlegend=False,
    ))

    fig.add_trace(go.Scatter(
        x=[result.min, result.avg, result.max],
        y=["Range", "Range", "Range"],
        mode="markers+text",
        marker=dict(color=["#94a3b8", AVG_COLOR, "#94a3b8"], size=12, symbol="line-ns-open"),
        text=[f"MIN {result.min}", f"AVG {result.avg}", f"MAX {result.max}"],
        textposition=["top center", "bottom center", "top center"],
        hoverinfo="skip",
        name="Markers",
        showlegend=False,
    ))

    fig.update_layout(
        height=height,
        margin=dict(l=20, r=20, t=40, b=20),
        title=dict(text=f"Range Projection (Δ {result.spread})", font=dict(size=14)),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(showgrid=False, zeroline=False),
        yaxis=dict(showticklabels=False),
    )

    return fig
