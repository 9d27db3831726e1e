import streamlit as st

st.set_page_config(page_title="About • EU Mortgage Subsidy Copilot", layout="centered")

st.title("📄 About This Project")
st.caption("Version 1.0 — AI-assisted research on housing subsidies across the EU")

st.markdown("""
## Project Scope
This app helps mortgage advisors find **government-backed housing and mortgage subsidies** for a client. It focuses on:
- National and regional schemes for buying a **primary residence**
- Matching schemes to a **free-text client profile** (age, family, income, energy goals)
- Optional filters: **minimum grant amount**, **eligibility traits**, **subsidy type** (grant, loan, tax credit)
- A short summary with **numbered citations** that link to the web pages the model used

---

## Objectives
1. **Sources first** → every answer is grounded with live Google Search results and shows its links.
2. **Structured output** → subsidies come back as name, description, eligibility and benefit.
3. **Graceful failure** → if the model answers in an unexpected format, you get an empty result with an explanation instead of a crash.
4. **Privacy** → the app does not store inputs or results; everything is session-local.

---

## What This App Is Not
- It’s **not** financial or legal advice.
- It does **not** replace the official scheme pages or a lender's own checks.
- Amounts and rules change often; the model can be wrong. Always open the cited sources.
""")
