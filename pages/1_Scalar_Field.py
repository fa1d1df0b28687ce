# Scalar Field Explorer: f(x,y), gradient field and parametric path r(t)
# ----------------------------------------------------------------------
# - SymPy parsing compiled once per render, evaluated point by point
# - Central-difference gradient (h = 0.001) on every grid cell
# - Plotly: 3D surface + gradient cones, contour + quiver, height profile f(r(t))
# - Cells that cannot be evaluated (log of negatives, 1/0...) render as gaps

from __future__ import annotations

import logging
import time

import streamlit as st

from field_explorer import config
from field_explorer.errors import FieldExplorerError
from field_explorer.logging_config import setup_logging
from field_explorer.models import Range
from field_explorer.plots import contour_figure, profile_figure, surface_figure
from field_explorer.probe import probe_point
from field_explorer.sampler import generate_field_data
from field_explorer.trajectory import evaluate_trajectory
from field_explorer.validation import FieldForm, validate_form


# ----------------------------
# 0) PAGE CONFIG (MUST BE FIRST)
# ----------------------------
st.set_page_config(page_title="Scalar Field Explorer", layout="wide")

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger("field_explorer.app")


# ----------------------------
# 1) STYLE
# ----------------------------
st.markdown(
    """
<style>
:root {
  --bg: #0e1117;
  --border: rgba(255,255,255,0.08);
  --muted: rgba(229,231,235,0.60);
  --muted2: rgba(229,231,235,0.40);
  --accent: #FF4B4B;
  --accent2: #1E90FF;
}

.main { background-color: var(--bg); }
section[data-testid="stSidebar"] { background-color: #0b1020; border-right: 1px solid var(--border); }

div[data-testid="stMetric"]{
  background: linear-gradient(180deg, rgba(255,255,255,0.045), rgba(255,255,255,0.018));
  border: 1px solid rgba(255,255,255,0.06);
  border-radius: 14px;
  padding: 14px;
}

.hr {
  border: none;
  border-top: 1px solid var(--border);
  margin: 0.75rem 0 1.0rem 0;
}

.small-muted { color: var(--muted); font-size: 0.92rem; }
.badge {
  display:inline-block; padding: 0.18rem 0.55rem; border-radius: 999px;
  background: rgba(255,255,255,0.06); border: 1px solid rgba(255,255,255,0.08);
  color: rgba(229,231,235,0.80); font-size: 0.82rem;
}
.footer { text-align:center; color: var(--muted2); margin-top: 14px; font-size: 0.85rem; }
</style>
""",
    unsafe_allow_html=True,
)


# ----------------------------
# 2) THEORY PANEL
# ----------------------------
def theory_panel():
    st.markdown("## 🧠 Mathematical Foundations")
    st.markdown(
        "<span class='badge'>Scalar Field</span> "
        "<span class='badge'>Gradient</span> "
        "<span class='badge'>Central Differences</span> "
        "<span class='badge'>Parametric Path</span>",
        unsafe_allow_html=True,
    )

    with st.expander("Open theory (gradient, central differences, paths)", expanded=False):
        st.markdown("### 1) Scalar field and gradient")
        st.latex(r"f:\mathbb{R}^2\to\mathbb{R},\qquad \nabla f=\left(\frac{\partial f}{\partial x},\frac{\partial f}{\partial y}\right)")
        st.markdown(r"- The gradient points in the direction of steepest increase of \(f\).")
        st.markdown("### 2) Central difference")
        st.latex(r"\frac{\partial f}{\partial x}(x_0,y_0)\approx\frac{f(x_0+h,y_0)-f(x_0-h,y_0)}{2h},\quad h=0.001")
        st.markdown("- Fixed step: accuracy degrades for very large or very small coordinate ranges.")
        st.markdown("### 3) Height along a path")
        st.latex(r"r(t)=(x(t),y(t)),\qquad z(t)=f(x(t),y(t))")


# ----------------------------
# 3) HEADER
# ----------------------------
st.title("🌄 Scalar Field Explorer")
st.caption("SymPy Parsing • Central-Difference Gradient • Plotly Surface / Contour / Path")
st.markdown("<div class='hr'></div>", unsafe_allow_html=True)

theory_panel()
st.markdown("<div class='hr'></div>", unsafe_allow_html=True)


# ----------------------------
# 4) SIDEBAR (CONTROLS)
# ----------------------------
st.sidebar.header("Controls")

examples = {
    "Ripple (default)": config.DEFAULT_F,
    "Paraboloid": "x^2 + y^2",
    "Saddle": "x^2 - y^2",
    "Gaussian hill": "exp(-(x^2 + y^2))",
    "Log (with gaps)": "log(x) + y",
}
pick = st.sidebar.selectbox("Quick examples", list(examples.keys()), index=0)
expr_f = st.sidebar.text_input("f(x,y)", value=examples[pick])

st.sidebar.markdown("---")
st.sidebar.subheader("Domain")
c1, c2 = st.sidebar.columns(2)
x_min = c1.number_input("x min", value=config.DEFAULT_X_RANGE[0], format="%.4f")
x_max = c2.number_input("x max", value=config.DEFAULT_X_RANGE[1], format="%.4f")
c3, c4 = st.sidebar.columns(2)
y_min = c3.number_input("y min", value=config.DEFAULT_Y_RANGE[0], format="%.4f")
y_max = c4.number_input("y max", value=config.DEFAULT_Y_RANGE[1], format="%.4f")

res = st.sidebar.slider(
    "Grid resolution", config.RESOLUTION_MIN, config.RESOLUTION_MAX, config.RESOLUTION_DEFAULT, step=1
)

st.sidebar.markdown("---")
st.sidebar.subheader("Trajectory r(t)")
expr_xt = st.sidebar.text_input("x(t)", value=config.DEFAULT_XT)
expr_yt = st.sidebar.text_input("y(t)", value=config.DEFAULT_YT)
c5, c6 = st.sidebar.columns(2)
t_min = c5.number_input("t min", value=config.DEFAULT_T_RANGE[0], format="%.4f")
t_max = c6.number_input("t max", value=config.DEFAULT_T_RANGE[1], format="%.4f")

st.sidebar.markdown("---")
st.sidebar.subheader("Point P")
show_probe = st.sidebar.checkbox("Show gradient at P", value=True)
c7, c8 = st.sidebar.columns(2)
px0 = c7.number_input("x0", value=config.DEFAULT_PROBE[0], format="%.4f")
py0 = c8.number_input("y0", value=config.DEFAULT_PROBE[1], format="%.4f")

st.sidebar.markdown("---")
st.sidebar.caption("Syntax: x^2 or x**2, sin, cos, exp, log, sqrt, abs, pi, e.")


# ----------------------------
# 5) VALIDATE (FAIL FAST)
# ----------------------------
form = FieldForm(
    expr_f=expr_f,
    x_range=Range(x_min, x_max),
    y_range=Range(y_min, y_max),
    t_range=Range(t_min, t_max),
    resolution=int(res),
    expr_xt=expr_xt,
    expr_yt=expr_yt,
)

errors = validate_form(form)
if errors:
    labels = {
        "f": "f(x,y)", "xt": "x(t)", "yt": "y(t)",
        "x_range": "x range", "y_range": "y range", "t_range": "t range",
        "resolution": "Resolution",
    }
    for key, message in errors.items():
        st.error(f"**{labels.get(key, key)}**: {message}")
    st.stop()


# ----------------------------
# 6) COMPUTE
# ----------------------------
t0 = time.time()
try:
    mesh = generate_field_data(form.expr_f, form.x_range, form.y_range, form.resolution)
except FieldExplorerError as e:
    st.error(f"Could not sample the field: {e}")
    st.stop()

trajectory = None
if form.wants_trajectory:
    try:
        trajectory = evaluate_trajectory(form.expr_f, form.expr_xt, form.expr_yt, form.t_range,
                                         config.DEFAULT_POINT_COUNT)
    except FieldExplorerError as e:
        # the field still renders without its path
        logger.warning("Could not evaluate the trajectory: %s", e)
        st.warning(f"Trajectory skipped: {e}")

probe = None
if show_probe:
    try:
        probe = probe_point(form.expr_f, px0, py0, form.x_range.span)
    except FieldExplorerError as e:
        st.warning(f"Gradient at P unavailable: {e}")
t1 = time.time()

logger.info("Rendered %r at %dx%d in %.3fs", form.expr_f, form.resolution, form.resolution, t1 - t0)


# ----------------------------
# 7) METRICS STRIP
# ----------------------------
m1, m2, m3, m4, m5 = st.columns([1.25, 1.05, 1.05, 1.0, 1.0])

m1.metric("Domain", "2D", f"x∈[{x_min:.3g},{x_max:.3g}]  y∈[{y_min:.3g},{y_max:.3g}]")
m2.metric("Grid res", f"{mesh.resolution}×{mesh.resolution}", f"dx={mesh.dx:.3g}, dy={mesh.dy:.3g}")
m3.metric("Gaps (NaN cells)", f"{mesh.nan_count()}", "not evaluable")

if probe is not None:
    m4.metric("f(P)", f"{probe.z0:.6g}", f"P=({px0:.3g},{py0:.3g})")
    m5.metric("|∇f(P)|", f"{probe.magnitude:.6g}", f"({probe.u0:.3g}, {probe.v0:.3g})")
else:
    m4.metric("f(P)", "n/a", "—")
    m5.metric("|∇f(P)|", "n/a", "—")

st.markdown("<div class='hr'></div>", unsafe_allow_html=True)


# ----------------------------
# 8) TABS: SURFACE / CONTOUR / PROFILE / DATA
# ----------------------------
tab_surface, tab_contour, tab_profile, tab_data = st.tabs(["Surface 3D", "Contour + Gradient", "Height Profile", "Data"])

with tab_surface:
    fig = surface_figure(mesh, trajectory, probe, title=f"f(x,y) = {form.expr_f}")
    st.plotly_chart(fig, use_container_width=True)

with tab_contour:
    fig = contour_figure(mesh, form.x_range.span, trajectory)
    st.plotly_chart(fig, use_container_width=True)

with tab_profile:
    if trajectory is not None:
        st.plotly_chart(profile_figure(trajectory), use_container_width=True)
    else:
        st.info("No trajectory defined. Fill both x(t) and y(t) in the sidebar.")

with tab_data:
    left, right = st.columns([1.15, 1.0])

    with left:
        st.markdown("### 🧮 Grid samples")
        df_mesh = mesh.to_frame()
        st.dataframe(df_mesh, use_container_width=True, hide_index=True, height=320)
        st.download_button("Download grid (CSV)", df_mesh.to_csv(index=False), "field_grid.csv", "text/csv")

    with right:
        st.markdown("### 🛤️ Trajectory samples")
        if trajectory is not None:
            df_path = trajectory.to_frame()
            st.dataframe(df_path, use_container_width=True, hide_index=True, height=320)
            st.download_button("Download path (CSV)", df_path.to_csv(index=False), "trajectory.csv", "text/csv")
        else:
            st.info("No trajectory defined.")

    st.markdown(f"<div class='small-muted'>Compute runtime: {(t1 - t0):.3f}s</div>", unsafe_allow_html=True)


# ----------------------------
# 9) FOOTER
# ----------------------------
st.markdown("<div class='footer'>Scalar Field Explorer • finite differences, not symbolic derivatives</div>", unsafe_allow_html=True)
