import streamlit as st

from field_explorer import __version__, config

# ------------------------------------------------------------
# 1) PAGE CONFIG
# ------------------------------------------------------------
st.set_page_config(
    page_title="Scalar Field Explorer",
    page_icon="🌄",
    layout="wide"
)

# ------------------------------------------------------------
# 2) STYLE (CSS)
# ------------------------------------------------------------
st.markdown(
    """
<style>
.field-hero {
    padding: 3rem 2rem;
    background: radial-gradient(circle at top left, rgba(255,75,75,0.1), transparent),
                radial-gradient(circle at bottom right, rgba(30,144,255,0.1), transparent);
    border-radius: 24px;
    border: 1px solid rgba(255,255,255,0.1);
    text-align: center;
}
.field-hero h1 { font-size: 3rem; font-weight: 800; color: #FFFFFF; }
.field-hero p { color: rgba(229,231,235,0.70); font-size: 1.2rem; }
</style>
""",
    unsafe_allow_html=True,
)

# ------------------------------------------------------------
# 3) HERO
# ------------------------------------------------------------
st.markdown(
    """
    <div class="field-hero">
        <h1>SCALAR FIELD EXPLORER</h1>
        <p>Type a function f(x,y), see its surface, its gradient field and the height
        of any parametric path r(t) traced over it.</p>
    </div>
    """,
    unsafe_allow_html=True,
)
st.caption(f"field engine v{__version__}")

# ------------------------------------------------------------
# 4) WHAT IS COMPUTED
# ------------------------------------------------------------
FEATURES = (
    ("🗺️ Field sampling",
     "f(x,y) on a regular grid, endpoints included. Cells that cannot be evaluated become gaps."),
    ("🧭 Gradient field",
     f"∂f/∂x and ∂f/∂y at every cell by central differences, h = {config.DEFAULT_STEP}."),
    ("🛤️ Parametric paths",
     "r(t) = (x(t), y(t)) sampled over a t range and lifted onto the surface: z(t) = f(x(t), y(t))."),
)

st.markdown("### What the engine computes")
for col, (title, body) in zip(st.columns(len(FEATURES)), FEATURES):
    with col.container(border=True):
        st.markdown(f"**{title}**")
        st.write(body)

st.divider()

# ------------------------------------------------------------
# 5) NOTES + SYNTAX
# ------------------------------------------------------------
col_notes, col_syntax = st.columns(2, gap="large")

with col_notes:
    st.markdown("### About the numbers")
    st.write("Expressions are parsed once with **SymPy** and evaluated point by point. "
             "Derivatives are numerical, never symbolic.")
    st.info("The finite-difference step is fixed, so gradient estimates lose precision "
            "on very large or very small coordinate ranges.")

with col_syntax:
    st.markdown("### Syntax")
    st.code(
        "x^2 or x**2        power\n"
        "pi, e              constants\n"
        "sin cos tan exp log sqrt abs atan2(y, x) ...\n"
        "f uses x and y; x(t) and y(t) use t",
        language="text",
    )

st.sidebar.info("Open the Scalar Field page from the menu above to start exploring.")
st.caption("SymPy + NumPy + Plotly")
