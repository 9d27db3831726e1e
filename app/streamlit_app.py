import logging
from datetime import date

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from advisor.gemini_client import ConfigurationError, create_client
from advisor.subsidies import SubsidyAdvisor
from tools.citations import format_source, link_citations
from tools.models import AdvisorInput, SearchFilters
from tools.search_state import ERROR, RESULTS, SearchState
from tools.settings import load_settings

load_dotenv()
settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="EU Mortgage Subsidy Copilot", page_icon="🏛️", layout="centered")
st.title("🏛️ EU Mortgage Subsidy Copilot")
st.caption("Find government-backed housing and mortgage subsidies for your client, with links to the sources.")

GENERIC_ERROR = "An unexpected error occurred. Please try again later."
NO_RESULTS = (
    "No specific subsidies were found based on the provided profile and filters. "
    "Try adjusting your criteria or broadening the search."
)


@st.cache_resource
def get_advisor():
    return SubsidyAdvisor(create_client(settings), settings)


try:
    advisor = get_advisor()
except ConfigurationError as e:
    st.error(
        f"**Configuration error.** {e}\n\n"
        "Add the key (for example `GEMINI_API_KEY=...`) to your environment or a `.env` file "
        "in the project root, then restart the app."
    )
    st.stop()

if "search" not in st.session_state:
    st.session_state["search"] = SearchState()
if "client_profile" not in st.session_state:
    st.session_state["client_profile"] = ""
search: SearchState = st.session_state["search"]


def fill_example_profile():
    st.session_state["client_profile"] = advisor.generate_random_profile(st.session_state["country"])


def cited(text: str, sources) -> None:
    st.markdown(link_citations(text, sources), unsafe_allow_html=True)


# ---------------- Form ----------------
st.subheader("Find Your Mortgage Subsidy")

country = st.selectbox("Country", settings.countries, key="country")

st.button(
    "✨ Generate Example",
    on_click=fill_example_profile,
    help="Fill the profile with a realistic example for the selected country.",
)
client_profile = st.text_area(
    "Client Profile",
    key="client_profile",
    height=120,
    placeholder="e.g., First-time home buyer, under 35 years old, looking to purchase a new energy-efficient apartment.",
)

with st.expander("Advanced Filters", expanded=True):
    min_grant = st.number_input(
        "Minimum Grant Amount (€)", min_value=0, value=None, step=500, placeholder="e.g., 5000"
    )

    st.write("**Specific Eligibility**")
    cols = st.columns(2)
    eligibility = []
    for i, option in enumerate(settings.eligibility_options):
        with cols[i % 2]:
            if st.checkbox(option, key=f"elig_{option}"):
                eligibility.append(option)
    custom_eligibility = st.text_input("Other criteria", placeholder="Other criteria...")

    st.write("**Subsidy Type**")
    cols = st.columns(len(settings.subsidy_type_options))
    subsidy_types = []
    for col, option in zip(cols, settings.subsidy_type_options):
        with col:
            if st.checkbox(option, key=f"type_{option}"):
                subsidy_types.append(option)

if st.button("🔍 Search for Subsidies", type="primary", disabled=not client_profile.strip(),
             use_container_width=True):
    inp = AdvisorInput(
        country=country,
        client_profile=client_profile.strip(),
        filters=SearchFilters(
            min_grant_amount=min_grant,
            eligibility=eligibility,
            custom_eligibility=custom_eligibility,
            subsidy_types=subsidy_types,
        ),
    )
    search.begin()
    with st.spinner("Searching official sources..."):
        try:
            search.succeed(advisor.find_subsidies(inp))
        except Exception:
            logger.exception("Subsidy search failed")
            search.fail(GENERIC_ERROR)

# ---------------- Results ----------------
if search.status == ERROR:
    st.error(f"**Error**\n\n{search.error}")

elif search.status == RESULTS and search.result is not None:
    results, sources = search.result.response, search.result.sources
    st.divider()

    if not results.subsidies:
        with st.container(border=True):
            st.subheader("⚠️ No Subsidies Found")
            st.caption("Based on your criteria.")
            if results.summary:
                cited(results.summary, sources)
            else:
                st.write(NO_RESULTS)
    else:
        with st.container(border=True):
            st.subheader("✨ AI-Powered Summary")
            st.caption("A high-level overview of the findings based on your criteria.")
            for paragraph in results.summary.split("\n"):
                if paragraph.strip():
                    cited(paragraph, sources)

        st.subheader("Potential Benefits at a Glance")
        df = pd.DataFrame(
            [{"Subsidy": s.name, "Potential benefit": s.potential_benefit} for s in results.subsidies]
        )
        st.dataframe(df, hide_index=True, use_container_width=True)
        st.caption("Note: Benefits are estimates and may vary based on your specific situation.")

        st.subheader(f"Subsidies ({len(results.subsidies)})")
        for subsidy in results.subsidies:
            with st.expander(subsidy.name):
                cited(subsidy.description, sources)
                if subsidy.eligibility:
                    st.write("**Eligibility**")
                    st.markdown(
                        "\n".join(f"- {link_citations(e, sources)}" for e in subsidy.eligibility),
                        unsafe_allow_html=True,
                    )
                st.write("**Potential benefit**")
                cited(subsidy.potential_benefit, sources)

    if sources:
        st.caption("Sources:")
        for i, s in enumerate(sources, 1):
            st.markdown(f"- {format_source(i, s)}", unsafe_allow_html=True)


st.write("")
st.caption(
    "This tool provides AI-generated information for advisory purposes only. "
    "Always verify details with official government sources."
)
st.caption(f"© {date.today().year} EU Mortgage Subsidy Copilot. All rights reserved.")
