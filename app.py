import logging

import streamlit as st
from src.backend_logic import *
from src.io_csv import *
from src.config import get_config

config = get_config()
logging.basicConfig(level=config.log_level)

# ------------------------
# Streamlit UI
# ------------------------

st.set_page_config(
    page_title=f"CPI to Percentage Converter | {config.institution_name}",
    page_icon="🎓",
    layout="centered",
)

st.markdown(
    """
    <style>
    .issuer-block {
        text-align: right;
        font-size: 12px;
        color: #6b7280;
        margin-top: 24px;
    }

    .issuer-block strong {
        color: #374151;
    }

    .copyright {
        text-align: center;
        font-size: 12px;
        color: #6b7280;
        margin-top: 16px;
    }
    </style>
    """,
    unsafe_allow_html=True
)

col1, col2, col3 = st.columns([1, 2, 1])
with col2:
    st.image(config.logo_url, width=112)

st.title(f"🎓 {config.institution_name}")

st.markdown("---")
st.subheader("🧮 CPI to Percentage Converter")
st.caption(config.programme)

# ------------------------
# Converter
# ------------------------

cpi_text = st.text_input(
    "Enter your CPI (0-10)",
    key="cpi",
    placeholder="Enter CPI value",
)

result = convert(cpi_text)

if result.is_valid:
    st.metric("Equivalent Percentage", format_percentage(result.percentage))
elif not result.is_empty:
    st.error(result.message)

# ------------------------
# Formula details
# ------------------------

st.markdown("---")
st.markdown("#### Formula Details")

with st.expander("About this formula"):
    st.write(config.approval_note)

st.markdown(f"**Formula:** {FORMULA_TEXT}")
st.markdown("Where X is the CPI of the student.")

# ------------------------
# Batch conversion (optional CSV upload)
# ------------------------

st.markdown("---")
st.subheader("Convert a whole class")
st.write("Upload a CSV with a **CPI** column to convert every row at once.")

cpi_csv = st.file_uploader(
    "Upload CPI CSV",
    type=["csv"],
    key="cpi_csv",
)

if cpi_csv is not None:
    try:
        converted_df = convert_cpi_frame(validate_cpi_csv(read_csv_upload(cpi_csv)))
    except ValueError as e:
        st.error(f"CSV error: {e}")
    else:
        st.dataframe(
            converted_df,
            use_container_width=True,
            column_config={
                "Percentage": st.column_config.NumberColumn("Percentage", format="%.2f"),
            },
        )
        st.download_button(
            "Download converted CSV",
            data=to_csv_bytes(converted_df),
            file_name="cpi_percentages.csv",
            mime="text/csv",
        )

# ------------------------
# Reference table
# ------------------------

if st.checkbox("Show conversion table", key="show_table"):
    table = conversion_table()
    st.line_chart(table, x="CPI", y="Percentage")
    st.dataframe(table, use_container_width=True, hide_index=True)

st.markdown(
    f'<div class="issuer-block"><p>Date: {config.notice_date}</p>'
    f"<p><strong>{config.issuer}</strong></p></div>",
    unsafe_allow_html=True,
)
st.markdown(f'<p class="copyright">{config.footer}</p>', unsafe_allow_html=True)

# To run:
# streamlit run app.py
