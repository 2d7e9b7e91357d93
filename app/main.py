"""
Streamlit Frontend for the Roman Numeral Codec

A small converter UI:
1. Convert - type an integer or a numeral, see the other form
2. History - recent conversions from the audit log
3. Settings - active codec configuration

Failed conversions are shown with the reason; nothing is silently fixed.
"""

import html

import streamlit as st

from roman_codec.audit import AuditLogger, create_correlation_id
from roman_codec.config import get_settings, validate_all_settings
from roman_codec.models.audit import AuditSeverity
from roman_codec.models.numeral import NotationMode
from roman_codec.orchestrator import ConversionFlow, create_app_components


# Page configuration
st.set_page_config(
    page_title="Roman Numeral Codec",
    page_icon="🏛️",
    layout="centered",
    initial_sidebar_state="expanded",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .result-box {
        padding: 20px;
        background-color: #d4edda;
        border-radius: 10px;
        border-left: 5px solid #28a745;
        margin: 10px 0;
    }
    .error-box {
        padding: 20px;
        background-color: #f8d7da;
        border-radius: 10px;
        border-left: 5px solid #dc3545;
        margin: 10px 0;
    }
    .big-number {
        font-size: 2.5em;
        font-weight: bold;
        color: #2c3e50;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_components() -> tuple[ConversionFlow, AuditLogger]:
    """Get or create application components (cached)."""
    return create_app_components()


def main():
    """Main application entry point."""
    flow, audit_logger = get_components()

    st.sidebar.title("🏛️ Roman Numeral Codec")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["🔁 Convert", "📜 History", "⚙️ Settings"],
        index=0,
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        """
        **Examples:**
        - `1994` → MCMXCIV
        - `mmxxiv` → 2024
        - `4` in additive notation → IIII
        """
    )

    if page == "🔁 Convert":
        render_convert_page(flow)
    elif page == "📜 History":
        render_history_page(audit_logger)
    elif page == "⚙️ Settings":
        render_settings_page(flow)


def render_convert_page(flow: ConversionFlow):
    """Render the conversion page."""
    st.title("🔁 Convert")
    st.markdown(
        f"Enter an integer between 1 and {flow.codec.upper_bound}, "
        "or a Roman numeral."
    )

    raw = st.text_input("Integer or Roman numeral", value="", max_chars=40)
    mode = st.radio(
        "Notation for integers",
        options=list(NotationMode),
        format_func=lambda m: m.value.title(),
        horizontal=True,
    )

    if st.button("Convert", type="primary") and raw.strip():
        result = flow.convert(raw, mode, correlation_id=create_correlation_id())

        if result.success:
            output = result.numeral if result.direction == "encode" else result.number
            st.markdown(f"""
            <div class="result-box">
                <p>{html.escape(result.source)}</p>
                <p class="big-number">{output}</p>
            </div>
            """, unsafe_allow_html=True)
            for warning in result.warnings:
                st.warning(warning)
        else:
            st.markdown(f"""
            <div class="error-box">
                <h4>{html.escape(result.error_type or "")}</h4>
                <p>{html.escape(result.error_message or "")}</p>
            </div>
            """, unsafe_allow_html=True)


def render_history_page(audit_logger: AuditLogger):
    """Render the recent conversions page."""
    st.title("📜 History")

    events = audit_logger.recent_events(limit=25)
    if not events:
        st.info("Conversions will appear here once you make some.")
        return

    for event in events:
        line = f"{event.timestamp:%H:%M:%S} · {event.description}"
        if event.severity == AuditSeverity.INFO:
            st.success(line)
        else:
            st.error(f"{line}: {event.error_message}")


def render_settings_page(flow: ConversionFlow):
    """Render the settings page."""
    st.title("⚙️ Settings")

    status = validate_all_settings()
    for key in ("codec", "app"):
        if status.get(key, False):
            st.success(f"✅ {key} settings loaded")
        else:
            st.error(f"❌ {key} settings: {status.get(f'{key}_error', 'invalid')}")

    st.markdown("### Active codec")
    st.json({
        "upper_bound": flow.codec.upper_bound,
        "allow_historical_aliases": flow.codec.allow_historical_aliases,
        "strict_canonical": flow.codec.strict_canonical,
        "log_level": get_settings().app.log_level,
    })

    st.markdown(
        "Codec options are read from `ROMAN_CODEC_UPPER_BOUND`, "
        "`ROMAN_CODEC_ALLOW_HISTORICAL_ALIASES` and "
        "`ROMAN_CODEC_STRICT_CANONICAL`. Restart the app after changing them."
    )


if __name__ == "__main__":
    main()
