import streamlit as st

st.set_page_config(page_title="Methodology • EU Mortgage Subsidy Copilot", layout="centered")
st.title("🧩 Methodology")
st.caption("How a search turns into a cited list of subsidies")

st.markdown("""
## Architecture Overview
1. **Prompt builder** (`tools/subsidy_prompt.py`)
   - Embeds country and client profile.
   - Adds one line per active filter (minimum grant, client characteristics, subsidy types).
   - Asks for a single JSON object: `subsidies[]` (name, description, eligibility, potentialBenefit) + `summary`.

2. **Gemini call with Google Search grounding** (`advisor/subsidies.py`)
   - One `generate_content` call with the `google_search` tool.
   - Transient server/network failures are retried (up to 3 attempts); other failures show an error banner.

3. **Response resolver** (`advisor/parse.py`)
   - Strips a leading `` ```json `` and trailing `` ``` `` fence.
   - Validates the JSON against a schema; anything else becomes an empty result with an apology summary.

4. **Sources & citations** (`advisor/sources.py`, `tools/citations.py`)
   - Grounding chunks without a URL are dropped; a missing title falls back to the URL.
   - `[n]` markers in the text link to source *n*; unknown numbers stay as plain text.
""")

st.markdown("---")
st.header("Flowchart")
st.graphviz_chart("""
digraph SubsidySearch {
  graph [rankdir=LR, fontsize=10];
  node [shape=box, style="rounded,filled", fillcolor="#eef6ff"];

  Form[label="Form\\n(country, profile, filters)", fillcolor="#e8fff2"];
  Prompt[label="Prompt builder"];
  Gemini[label="Gemini + Google Search"];
  Parse[label="Response resolver\\n(JSON schema, fallback)"];
  Sources[label="Source mapper\\n(uri, title)"];
  UI[label="Summary & subsidy cards\\n(citations linked)", fillcolor="#e8fff2"];

  Form -> Prompt -> Gemini;
  Gemini -> Parse -> UI;
  Gemini -> Sources -> UI;
}
""")

st.markdown("""
---

## Example profiles
The **Generate Example** button asks the model for one realistic profile for the chosen country,
with thinking disabled for speed. If that call fails a fixed example is used instead.

## Configuration
- API key: `GEMINI_API_KEY` (or `API_KEY`) in the environment or a `.env` file.
- Model, country list and filter options: `config/app.yaml`.
""")
