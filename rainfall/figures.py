"""Interactive plotly figure for a rendered surface, used by the Streamlit app."""

import plotly.graph_objects as go

from rainfall.config import ChartSettings
from rainfall.render import GRID_COLOR, TEXT_COLOR, TITLE_COLOR, RenderedSurface


def surface_to_figure(surface: RenderedSurface, settings: ChartSettings) -> go.Figure:
    """
    Plotly version of ``surface`` with the same bars, ticks and captions.

    Hovering a bar shows plotly's hover label with the same text as the
    HoverController tooltip: the district and its average to one decimal.
    Plotly does not restyle the hovered bar, so the opacity and stroke
    emphasis exist only in ``HoverController.bar_style``.
    """
    m = settings.margins
    fig = go.Figure()

    fig.update_layout(
        width=surface.width,
        height=surface.height,
        margin=dict(t=m.top, r=m.right, b=m.bottom, l=m.left),
        plot_bgcolor="white",
        paper_bgcolor="white",
        showlegend=False,
        bargap=settings.band_padding,
        hoverlabel=dict(bgcolor="white", bordercolor=settings.hover_stroke),
    )

    if surface.message is not None:
        fig.add_annotation(
            text=surface.message.text,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(size=surface.message.size, color=surface.message.color),
        )

    if surface.is_error:
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False)
        return fig

    if surface.bars:
        fig.add_trace(go.Bar(
            x=[b.category for b in surface.bars],
            y=[b.value for b in surface.bars],
            marker=dict(
                color=[b.fill for b in surface.bars],
                opacity=settings.bar_opacity,
                line=dict(width=0),
            ),
            text=[label.text for label in surface.value_labels],
            textposition="outside",
            textfont=dict(size=12, color=TEXT_COLOR),
            cliponaxis=False,
            hovertemplate=f"<b>%{{x}}</b><br>%{{y:.1f}} {settings.unit}<extra></extra>",
        ))

    ticks = surface.value_axis.ticks if surface.value_axis else ()
    fig.update_layout(
        title=dict(text=settings.title, x=0.5, font=dict(size=18, color=TITLE_COLOR)),
    )
    fig.update_yaxes(
        title=dict(text=settings.value_caption, font=dict(size=12, color=TEXT_COLOR)),
        range=[0, surface.value_max],
        tickvals=[t.value for t in ticks],
        ticktext=[t.label for t in ticks],
        showgrid=True,
        gridcolor=GRID_COLOR,
        showline=True,
        linecolor="black",
        ticks="outside",
        zeroline=False,
    )
    fig.update_xaxes(
        title=dict(text=settings.category_caption, font=dict(size=12, color=TEXT_COLOR)),
        categoryorder="array",
        categoryarray=[b.category for b in surface.bars],
        showline=True,
        linecolor="black",
        ticks="outside",
        tickfont=dict(size=12, color=TEXT_COLOR),
    )
    return fig
