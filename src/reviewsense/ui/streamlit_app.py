"""Streamlit UI for ReviewSense."""

import logging
import sys
from pathlib import Path

import streamlit as st

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent.parent))

from reviewsense.core.config import settings
from reviewsense.core.constants import StatusMessages
from reviewsense.core.models import StatusMode
from reviewsense.services.review_analyzer import ReviewAnalyzer
from reviewsense.ui.presenter import (
    NO_RESULT_VIEW,
    count_label,
    form_token,
    review_text,
    sentiment_view,
    status_chip,
)

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)


def _render_sentiment(slot, view):
    with slot.container():
        col_icon, col_label = st.columns([1, 4])
        col_icon.markdown(f"## {view.icon}")
        col_label.markdown(f"**{view.label}**")
        col_label.caption(view.score_text)


def _reload(analyzer: ReviewAnalyzer):
    with st.spinner(StatusMessages.LOADING):
        st.session_state.ingestion = analyzer.reload()
    st.session_state.analysis = None


# Page configuration
st.set_page_config(
    page_title="ReviewSense - Sentiment Demo",
    page_icon="💬",
    layout="centered"
)

# The analyzer (and with it the review store) lives in the session
if "analyzer" not in st.session_state:
    st.session_state.analyzer = ReviewAnalyzer()
    st.session_state.analysis = None
    _reload(st.session_state.analyzer)

analyzer = st.session_state.analyzer

# Sidebar for the dataset
with st.sidebar:
    st.header("📄 Dataset")
    st.caption(analyzer.loader.source)

    if st.button("Reload TSV", use_container_width=True):
        _reload(analyzer)

    ingestion = st.session_state.ingestion
    st.markdown(status_chip(ingestion.status, ingestion.status_text))
    st.caption(count_label(analyzer.store.count))

# Main UI
st.title("💬 ReviewSense")
st.write("Pick a random review from the dataset and classify its sentiment with a Hugging Face model.")

if ingestion.status == StatusMode.ERROR:
    st.error(ingestion.error)

# Submitting the form (button or Enter in the token field) runs an analysis
with st.form("analyze_form"):
    token = st.text_input(
        "Hugging Face token (optional)",
        type="password",
        help="Leave empty to use the token configured on the server (HF_API_TOKEN), if any. "
             "Requests without a token are rate limited more aggressively.",
    )
    submitted = st.form_submit_button("Analyze random review", type="primary")

st.subheader("Review")
review_slot = st.empty()
st.subheader("Sentiment")
sentiment_slot = st.empty()
error_slot = st.empty()

if submitted:
    def _show_review(review):
        review_slot.info(review_text(review))
        _render_sentiment(sentiment_slot, NO_RESULT_VIEW)

    with st.spinner("Analyzing…"):
        st.session_state.analysis = analyzer.analyze(token=form_token(token), on_review=_show_review)

analysis = st.session_state.analysis
if analysis is None:
    review_slot.caption("No review analyzed yet.")
    _render_sentiment(sentiment_slot, NO_RESULT_VIEW)
else:
    if analysis.review is not None:
        review_slot.info(review_text(analysis.review))
    else:
        review_slot.caption("No review analyzed yet.")
    _render_sentiment(sentiment_slot, sentiment_view(analysis.result))
    if analysis.error:
        error_slot.error(analysis.error)
