"""
UK Global Talent Visa Assistant - Streamlit UI

Lightweight server-side UI for the answer pipeline.
Deploy to Streamlit Cloud for free hosting with secrets management.
"""

import os
from dataclasses import replace

import streamlit as st

# Set page config first (must be first Streamlit command)
st.set_page_config(
    page_title="Global Talent Visa Assistant",
    page_icon="",
    layout="wide",
)

# Load secrets into environment variables for the pipeline
if "OPENROUTER_API_KEY" in st.secrets:
    os.environ["OPENROUTER_API_KEY"] = st.secrets["OPENROUTER_API_KEY"]

from talentvisa.answers import StaticAnswerStore
from talentvisa.assistant import (
    AnswerResolver,
    AnswerSource,
    AssistantConfig,
    ClientInputError,
    parse_chat_request,
)
from talentvisa.config import get_settings
from talentvisa.llm.providers import create_llm_client


SOURCE_LABELS = {
    AnswerSource.PROBE: "Connectivity check",
    AnswerSource.GUIDED: "Prepared answer",
    AnswerSource.MODEL: "Model answer",
    AnswerSource.FALLBACK: "Offline answer (models unavailable)",
}


@st.cache_resource
def get_llm_client():
    """Build the completion client once per server process."""
    return create_llm_client(get_settings())


def get_resolver(models: list[str], timeout: float) -> AnswerResolver:
    """Initialize the resolver with the sidebar's model order and deadline."""
    settings = get_settings()
    config = replace(
        AssistantConfig.from_settings(settings),
        models=models or list(settings.models),
        attempt_timeout_s=timeout,
    )

    return AnswerResolver(
        llm=get_llm_client(),
        store=StaticAnswerStore(),
        config=config,
    )


def display_answer(result) -> None:
    """Render a resolution result."""
    if result.source is AnswerSource.FALLBACK:
        st.warning(SOURCE_LABELS[result.source])

    st.subheader("Answer")
    st.markdown(result.response)

    col1, col2, col3 = st.columns(3)
    col1.metric("Source", SOURCE_LABELS[result.source])
    col2.metric("Model", result.model or "n/a")
    col3.metric("Characters", len(result.response))


def main():
    """Main Streamlit application."""
    settings = get_settings()

    st.title("UK Global Talent Visa Assistant")
    st.caption("Tech Nation digital technology route - 中文问答")

    # Sidebar configuration
    with st.sidebar:
        st.header("Configuration")

        st.subheader("Model Settings")
        models = st.multiselect(
            "Model order",
            options=list(settings.models),
            default=list(settings.models),
            help="Models are tried in this order; the first answer wins",
        )
        timeout = st.slider(
            "Per-model timeout (s)",
            min_value=5.0,
            max_value=60.0,
            value=float(settings.attempt_timeout_s),
            step=5.0,
        )

        st.divider()
        st.subheader("Resume")
        uploaded = st.file_uploader("Upload resume (.txt)", type=["txt"])
        resume_text = st.text_area(
            "Or paste resume text",
            height=200,
            help=f"Only the first {settings.context_excerpt_chars} characters are used",
        )
        if uploaded is not None:
            resume_text = uploaded.read().decode("utf-8", errors="ignore")

        st.divider()
        if get_llm_client() is None:
            st.caption("No API key configured: free-form questions use offline answers.")
        else:
            st.caption("Keys are stored securely on the server.")

    resolver = get_resolver(models, timeout)

    # Guided questions
    st.subheader("Common Questions")
    question = None
    columns = st.columns(2)
    for i, guided in enumerate(resolver.store.guided_questions):
        if columns[i % 2].button(guided, key=f"guided_{i}", use_container_width=True):
            question = guided

    # Free-form question
    typed = st.text_input(
        "Ask your own question:",
        placeholder="例如：我的背景适合杰出人才还是杰出潜力路线？",
    )
    question = question or typed

    if question:
        try:
            request = parse_chat_request(
                {"message": question, "resumeContent": resume_text or None}
            )
        except ClientInputError as e:
            st.error(str(e))
            return

        with st.spinner("Thinking..."):
            result = resolver.resolve(request.message, request.resume_content)
        display_answer(result)

    # Footer
    st.divider()
    st.caption(
        "Global Talent Visa Assistant - general guidance only, not legal advice."
    )


if __name__ == "__main__":
    main()
