# This package contains the Streamlit character browser built on the Rick and Morty API contracts.
# The modules separate configuration, HTTP access, state-changing actions and page rendering.
