# app.py
"""
Shift Performance Dashboard - Main Entry Point

Version: 1.0.0
"""

import streamlit as st
import logging

from utils.config import config

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.get_app_setting("LOG_LEVEL", "INFO"), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ==================== PAGE CONFIGURATION ====================

APP_NAME = "Shift Performance"
APP_ICON = "📦"
APP_VERSION = "1.0.0"

st.set_page_config(
    page_title=f"{APP_NAME} Dashboard",
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="expanded"
)

# ==================== CUSTOM CSS ====================

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        margin-bottom: 0.5rem;
        color: #0071ce;
    }

    .sub-header {
        font-size: 1.1rem;
        color: #666;
        margin-bottom: 2rem;
    }

    .info-card {
        background: #f8f9fa;
        padding: 1.5rem;
        border-radius: 0.5rem;
        border-left: 4px solid #0071ce;
        margin-bottom: 1rem;
    }

    .footer {
        text-align: center;
        color: #888;
        padding: 1rem;
        margin-top: 3rem;
        border-top: 1px solid #eee;
        font-size: 0.9rem;
    }
</style>
""", unsafe_allow_html=True)


# ==================== HELPER FUNCTIONS ====================

def show_dataset_status():
    """Dataset location and availability"""
    dataset = config.get_dataset_config()

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Dataset", "✅ Found" if dataset.exists() else "❌ Missing")
    with col2:
        st.metric("Fiscal Year", f"FY{dataset.fiscal_year}")
    with col3:
        st.metric("Cache TTL", f"{config.get_app_setting('CACHE_TTL_SECONDS', 300)}s")

    st.caption(f"Path: `{dataset.path}`")
    if not dataset.exists():
        st.warning("Set SHIFT_METRICS_PATH in .env (or DATASET.PATH in secrets) to the metrics JSON file.")


def show_main_app():
    """Display the welcome page"""
    st.markdown(f'<p class="main-header">{APP_ICON} {APP_NAME}</p>', unsafe_allow_html=True)
    st.markdown('<p class="sub-header">Warehouse shift KPIs by month, category and week</p>', unsafe_allow_html=True)

    st.markdown("### 📊 Available Dashboards")

    st.markdown("""
    <div class="info-card">
        <strong>📦 Shift Performance</strong><br>
        <span style="color: #666;">Pick a month, drill into a shift's Quality / Safety / Cost / Trending metrics,
        open the month overview (KPIs, YTD, rankings, goal achievement) or compare up to 3 shifts.</span>
    </div>
    """, unsafe_allow_html=True)

    if config.is_feature_enabled("DEBUG_MODE"):
        st.markdown("---")
        with st.expander("🔧 System Status"):
            show_dataset_status()
            st.json(config.app_config)
    else:
        show_dataset_status()

    # Footer
    st.markdown(f"""
    <div class="footer">
        <strong>{APP_NAME}</strong> v{APP_VERSION}
    </div>
    """, unsafe_allow_html=True)


# ==================== MAIN ====================

def main():
    """Main application entry point"""
    show_main_app()


if __name__ == "__main__":
    main()
