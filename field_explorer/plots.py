"""
Plotly figures for a sampled field.

Only consumes Mesh / TrajectorySample / PointProbe; nothing in the engine
imports this module.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import plotly.graph_objects as go

from .config import CONE_TARGET_COUNT, QUIVER_ARROW_SCALE, QUIVER_THINNING_RESOLUTION
from .models import Mesh, PointProbe, TrajectorySample

GRID_COLOR = "rgba(255,255,255,0.06)"
PATH_COLOR = "#ec4899"
PROBE_COLOR = "#fb923c"


# ----------------------------
# 1) ARROW DATA
# ----------------------------
def arrow_stride(resolution: int) -> int:
    return max(1, resolution // CONE_TARGET_COUNT)


def cone_samples(mesh: Mesh) -> Tuple[np.ndarray, ...]:
    """Every arrow_stride-th cell with finite z, u and v, flattened for a Cone trace."""
    s = arrow_stride(mesh.resolution)
    X, Y = np.meshgrid(mesh.x[::s], mesh.y[::s], indexing="xy")
    Z = mesh.z[::s, ::s]
    U = mesh.u[::s, ::s]
    V = mesh.v[::s, ::s]
    keep = np.isfinite(Z) & np.isfinite(U) & np.isfinite(V)
    return X[keep], Y[keep], Z[keep], U[keep], V[keep]


def quiver_segments(mesh: Mesh, span: float) -> Tuple[List[Optional[float]], List[Optional[float]]]:
    """
    Line segments (tail -> tail + scaled gradient) separated by None.

    Arrows are scaled so the longest one is 0.8 of a grid cell; above 20x20
    only every other row and column is drawn.
    """
    res = mesh.resolution
    mags = np.hypot(mesh.u, mesh.v)
    finite = np.isfinite(mags)
    max_mag = float(mags[finite].max()) if finite.any() else 0.0
    scale = span / res * QUIVER_ARROW_SCALE / (max_mag or 1.0)
    thin = res > QUIVER_THINNING_RESOLUTION

    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for r in range(res):
        for c in range(res):
            if thin and (r % 2 or c % 2):
                continue
            if not finite[r, c]:
                continue
            x, y = float(mesh.x[c]), float(mesh.y[r])
            xs.extend([x, x + float(mesh.u[r, c]) * scale, None])
            ys.extend([y, y + float(mesh.v[r, c]) * scale, None])
    return xs, ys


# ----------------------------
# 2) FIGURES
# ----------------------------
def _dark_layout(fig: go.Figure, **kwargs) -> go.Figure:
    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        **kwargs,
    )
    return fig


def surface_figure(mesh: Mesh, trajectory: Optional[TrajectorySample] = None,
                   probe: Optional[PointProbe] = None, title: str = "") -> go.Figure:
    fig = go.Figure()

    fig.add_trace(go.Surface(
        x=mesh.x, y=mesh.y, z=mesh.z,
        name="f(x,y)",
        colorscale="Viridis",
        opacity=0.8,
        showscale=False,
        contours=dict(z=dict(show=True, usecolormap=True, highlightcolor="#fff", project_z=True)),
        hovertemplate="x=%{x:.4f}<br>y=%{y:.4f}<br>z=%{z:.4f}<extra></extra>",
    ))

    cx, cy, cz, cu, cv = cone_samples(mesh)
    if cx.size:
        fig.add_trace(go.Cone(
            x=cx, y=cy, z=cz,
            u=cu, v=cv, w=np.zeros_like(cu),
            sizemode="absolute",
            sizeref=2,
            anchor="tail",
            colorscale="Reds",
            showscale=False,
            name="Gradient",
        ))

    if trajectory is not None:
        fig.add_trace(go.Scatter3d(
            x=trajectory.x, y=trajectory.y, z=trajectory.z,
            mode="lines",
            line=dict(color=PATH_COLOR, width=6),
            name="r(t)",
        ))

    if probe is not None:
        fig.add_trace(go.Scatter3d(
            x=[probe.x0, probe.x_end], y=[probe.y0, probe.y_end], z=[probe.z0, probe.z0],
            mode="lines",
            line=dict(color=PROBE_COLOR, width=8),
            name="∇f(P)",
        ))
        fig.add_trace(go.Cone(
            x=[probe.x_end], y=[probe.y_end], z=[probe.z0],
            u=[probe.u0], v=[probe.v0], w=[0],
            sizemode="absolute",
            sizeref=0.5,
            anchor="tip",
            colorscale=[[0, PROBE_COLOR], [1, PROBE_COLOR]],
            showscale=False,
            name="∇f(P) tip",
        ))
        fig.add_trace(go.Scatter3d(
            x=[probe.x0], y=[probe.y0], z=[probe.z0],
            mode="markers",
            marker=dict(color="#fff", size=4, opacity=0.8),
            name="P",
            hovertemplate="P=(%{x:.4f}, %{y:.4f})<br>f(P)=%{z:.4f}<extra></extra>",
        ))

    return _dark_layout(
        fig,
        title=title,
        margin=dict(l=0, r=0, t=40 if title else 0, b=0),
        scene=dict(
            xaxis=dict(title="x", showgrid=True, gridcolor=GRID_COLOR),
            yaxis=dict(title="y", showgrid=True, gridcolor=GRID_COLOR),
            zaxis=dict(title="z", showgrid=True, gridcolor=GRID_COLOR),
            camera=dict(eye=dict(x=1.4, y=1.4, z=1.4)),
        ),
    )


def contour_figure(mesh: Mesh, span: float, trajectory: Optional[TrajectorySample] = None) -> go.Figure:
    fig = go.Figure()

    fig.add_trace(go.Contour(
        x=mesh.x, y=mesh.y, z=mesh.z,
        colorscale="Viridis",
        ncontours=15,
        line=dict(smoothing=0.85, width=0.5),
        colorbar=dict(title="f(x,y)", thickness=10, len=0.8),
    ))

    qx, qy = quiver_segments(mesh, span)
    fig.add_trace(go.Scatter(
        x=qx, y=qy,
        mode="lines",
        line=dict(color="rgba(255, 255, 255, 0.4)", width=1),
        hoverinfo="skip",
        name="Gradient",
    ))

    if trajectory is not None:
        fig.add_trace(go.Scatter(
            x=trajectory.x, y=trajectory.y,
            mode="lines",
            line=dict(color=PATH_COLOR, width=3, dash="dot"),
            name="r(t) projection",
        ))

    _dark_layout(fig, showlegend=False, margin=dict(l=40, r=20, t=40, b=30))
    fig.update_xaxes(title="x", scaleanchor="y", showgrid=True, gridcolor=GRID_COLOR)
    fig.update_yaxes(title="y", showgrid=True, gridcolor=GRID_COLOR)
    return fig


def profile_figure(trajectory: TrajectorySample) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=trajectory.t, y=trajectory.z,
        mode="lines",
        fill="tozeroy",
        line=dict(color=PATH_COLOR, width=3),
        name="f(r(t))",
        hovertemplate="t=%{x:.4f}<br>f=%{y:.6f}<extra></extra>",
    ))
    _dark_layout(fig, hovermode="x unified", margin=dict(l=50, r=20, t=20, b=40))
    fig.update_xaxes(title="t", showgrid=True, gridcolor=GRID_COLOR)
    fig.update_yaxes(title="f(x(t), y(t))", showgrid=True, gridcolor=GRID_COLOR)
    return fig
