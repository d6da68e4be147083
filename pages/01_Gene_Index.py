import os
import streamlit as st
import plotly.express as px
from catalog import CATALOG_ENV_VAR, catalog_frame, gene_counts, get_provider_from_session

st.header("Gene Index")
st.caption("Every associated gene across the catalog, one row per gene.")

provider = get_provider_from_session(os.getenv(CATALOG_ENV_VAR))
df = catalog_frame(provider.disorders)

if df.empty:
    st.info("No genes in the current catalog.")
    st.stop()

st.dataframe(df, use_container_width=True, hide_index=True)

st.subheader("Genes per disorder")
counts = gene_counts(provider.disorders)
st.plotly_chart(px.bar(counts, title="Associated genes", labels={"index": "Disorder", "value": "Genes"}),
                use_container_width=True)

csv = df.to_csv(index=False).encode("utf-8")
st.download_button("Download Gene Index (CSV)", data=csv, file_name="gene_index.csv", type="primary")
