import os
import streamlit as st
from catalog import CATALOG_ENV_VAR, catalog_to_json, get_provider_from_session

st.header("About")
st.caption("Glossary and catalog format.")

st.subheader("Glossary")
st.markdown("""
- **Corticogenesis**: the biological process by which the layers of the cerebral cortex form.
- **Record**: an immutable entry describing one disorder or one gene.
""")

st.subheader("Catalog file")
st.markdown(f"""
Set `{CATALOG_ENV_VAR}` to a `.json`, `.yml` or `.yaml` file to replace the built-in catalog.
The file holds a list of disorders (optionally under a `disorders` key), each with
`name`, `common_name`, `icon_name`, `cause`, `symptoms` and `genes`
(a list of `name` / `description` pairs). Unreadable files fall back to the built-in catalog.
""")

provider = get_provider_from_session(os.getenv(CATALOG_ENV_VAR))
st.download_button("Download current catalog (JSON)",
                   data=catalog_to_json(provider.disorders).encode("utf-8"),
                   file_name="disorders.json")
