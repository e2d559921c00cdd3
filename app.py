"""
Suicide Risk Detector
Streamlit front end for TF-IDF screening of text for suicide-risk language.
"""

import json

import streamlit as st

from suicide_risk_detector import (
    DependencyMissingError,
    RiskClassifier,
    ValidationError,
    crisis_resources,
    load_resources,
)
from suicide_risk_detector.config import configure_logging, get_settings
from suicide_risk_detector.info import DISCLAIMER

settings = get_settings()
configure_logging(settings.log_level)

# Page configuration
st.set_page_config(
    page_title="Suicide Risk Detector",
    page_icon="🧠",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS
st.markdown(
    """
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #1E3A5F;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.1rem;
        color: #666;
        margin-bottom: 2rem;
    }
    .stat-box {
        background: linear-gradient(135deg, #1E3A5F 0%, #2E5A8F 100%);
        color: white;
        padding: 1rem;
        border-radius: 8px;
        text-align: center;
    }
    .stat-number {
        font-size: 2rem;
        font-weight: 700;
    }
    .stat-label {
        font-size: 0.9rem;
        opacity: 0.9;
    }
</style>
""",
    unsafe_allow_html=True,
)

RISK_ICONS = {"low": "🟢", "moderate": "🟡", "high": "🔴"}


@st.cache_resource
def get_classifier(model_dir: str) -> RiskClassifier:
    """Load the model files once per process."""
    return RiskClassifier(load_resources(model_dir))


def init_session_state():
    """Initialize session state variables."""
    if "prediction" not in st.session_state:
        st.session_state.prediction = None


def render_sidebar(classifier: RiskClassifier):
    """Render the sidebar with model info and crisis hotlines."""
    with st.sidebar:
        st.markdown("### 📊 Model")
        info = classifier.model_info()
        st.markdown(
            f"""
        - **Model:** {info.model}
        - **Accuracy:** {info.accuracy:.2%}
        - **Vocabulary:** {info.vocabulary_size:,} terms
        - **Classes:** {", ".join(info.classes)}
        - **Samples:** {info.total_samples:,}
        """
        )

        st.markdown("---")
        render_hotlines()

        st.markdown("---")
        st.caption(DISCLAIMER)


def render_hotlines():
    """Render the crisis hotline listing."""
    st.markdown("### 📞 Crisis Resources")
    for hotline in crisis_resources():
        lines = [f"**{hotline.name}**"]
        if hotline.number:
            lines.append(hotline.number)
        if hotline.website:
            lines.append(hotline.website)
        if hotline.description:
            lines.append(f"*{hotline.description}*")
        if hotline.available:
            lines.append(f"Available {hotline.available}")
        st.markdown("  \n".join(lines))


def render_prediction(result: dict):
    """Render a single prediction."""
    st.markdown("## 📋 Assessment")
    col1, col2, col3 = st.columns(3)

    risk_level = result["risk_level"]
    stats = [
        (result["prediction"], "Prediction"),
        (f"{RISK_ICONS.get(risk_level, '')} {risk_level.title()}", "Risk Level"),
        (f"{result['confidence']:.0%}", "Confidence"),
    ]
    for col, (value, label) in zip((col1, col2, col3), stats):
        with col:
            st.markdown(
                f"""
            <div class="stat-box">
                <div class="stat-number">{value}</div>
                <div class="stat-label">{label}</div>
            </div>
            """,
                unsafe_allow_html=True,
            )

    if result.get("message"):
        st.info(result["message"])
    else:
        st.markdown(f"**Tokens processed:** {result['tokens_processed']}")
        with st.expander("🔎 Preprocessed text", expanded=False):
            st.text(result["preprocessed_text"])

    if risk_level in ("moderate", "high"):
        st.warning(
            "⚠️ This text shows signs of suicide risk. If you or someone you know "
            "is struggling, please reach out to one of the crisis resources below."
        )
        render_hotlines()

    st.download_button(
        "📄 Download JSON",
        data=json.dumps(result, indent=2),
        file_name="risk_assessment.json",
        mime="application/json",
    )


def main():
    """Main application entry point."""
    init_session_state()

    try:
        classifier = get_classifier(str(settings.model_dir))
    except DependencyMissingError as e:
        st.error(f"❌ Error loading model files: {e}")
        st.code("export SRD_MODEL_DIR=/path/to/model_files", language="bash")
        st.stop()

    render_sidebar(classifier)

    st.markdown('<p class="main-header">🧠 Suicide Risk Detector</p>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">TF-IDF screening of text for suicide-risk language</p>',
        unsafe_allow_html=True,
    )

    tab1, tab2 = st.tabs(["📝 Single Text", "📁 Batch Analysis"])

    with tab1:
        text = st.text_area("Enter text to analyze", height=200)

        if st.button("🔍 Analyze Text", type="primary", use_container_width=True):
            try:
                st.session_state.prediction = classifier.classify(text).to_dict()
            except ValidationError as e:
                st.warning(f"⚠️ {e}")
                st.session_state.prediction = None

        if st.session_state.prediction:
            st.markdown("---")
            render_prediction(st.session_state.prediction)

    with tab2:
        st.markdown("### 📁 Batch Analysis")
        st.markdown("Upload a text file with one entry per line")

        batch_file = st.file_uploader(
            "Upload a text file",
            type=["txt"],
            help="Each non-blank line is classified separately",
            key="batch_file",
        )

        if batch_file:
            content = batch_file.getvalue().decode("utf-8", errors="replace")
            lines = [line for line in content.splitlines() if line.strip()]
            st.info(f"📁 {len(lines)} entries found")

            if st.button("🚀 Analyze All", type="primary", use_container_width=True):
                results = [r.to_dict() for r in classifier.classify_batch(lines)]

                st.markdown("### 📊 Batch Results Summary")
                st.dataframe(
                    [
                        {
                            "Text": r["original_text"][:80],
                            "Prediction": r["prediction"],
                            "Risk": r["risk_level"],
                            "Confidence": r["confidence"],
                        }
                        for r in results
                    ],
                    use_container_width=True,
                )

                st.download_button(
                    "📥 Download All Results (JSON)",
                    data=json.dumps(results, indent=2),
                    file_name="batch_risk_assessment.json",
                    mime="application/json",
                )


if __name__ == "__main__":
    main()
