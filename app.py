import logging
import os

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px
import plotly.graph_objects as go
import yaml

from components.benchmark import run_benchmark, time_build
from pattern_tries import DEFAULT_PLURALS, IRREGULAR_PLURALS, Modifiers, PairedMapping, PatternError
from pattern_tries import format as table_format

logging.basicConfig(level=os.environ.get("PATTERN_TRIES_LOG_LEVEL", "INFO"))
log = logging.getLogger("pattern_tries.app")

# Configure page
st.set_page_config(
    page_title="Pattern Trie Bench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

if 'tables' not in st.session_state:
    st.session_state['tables'] = {
        "plural": PairedMapping(DEFAULT_PLURALS),
        "irregular": PairedMapping(IRREGULAR_PLURALS),
    }

modifiers = Modifiers()

# Main title
st.title("🌳 Pattern Trie Bench")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Table Upload", "Lookup", "Benchmark"]
    )

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🔄 Reset Tables"):
        del st.session_state['tables']
        st.rerun()

tables = st.session_state['tables']

# Main content area
if page == "Home":
    st.header("Wildcard Prefix Trees")

    st.markdown("""
    Each table is a list of `pattern → pattern` pairs with at most one `%` wildcard per side.
    Both sides are compiled into a prefix tree so lookups work in either direction:

    - `%y → %ies` maps **ferry** to **ferries**, and **ferries** back to **ferry**
    - patterns are tried in table order, so list specific suffixes before the bare `%`
    """)

    total_pairs = sum(len(m) for m in tables.values())
    total_nodes = sum(m.forward.count_nodes() + m.reverse.count_nodes() for m in tables.values())

    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("Tables", len(tables))

    with col2:
        st.metric("Pattern Pairs", total_pairs)

    with col3:
        st.metric("Tree Nodes", total_nodes)

elif page == "Table Upload":
    st.header("📁 Table Upload")

    st.markdown("Upload a CSV (`key,value[,table]`), JSON or YAML file of pattern tables:")

    uploaded_file = st.file_uploader(
        "Choose a table file",
        type=['csv', 'json', 'yml', 'yaml'],
        help="Rows are inserted in file order; put catch-all patterns last"
    )

    if uploaded_file is not None:
        try:
            loaded = table_format.load_buffer(uploaded_file.name, uploaded_file.getvalue())

            tables.update(loaded)
            st.success(f"✅ Loaded {len(loaded)} table(s): {', '.join(loaded)}")

            for table_name, mapping in loaded.items():
                st.subheader(table_name)
                st.dataframe(table_format.dump_table(mapping))

        except (PatternError, table_format.FormatError) as e:
            st.error(f"❌ Invalid table: {e}")
        except (ValueError, yaml.YAMLError) as e:
            log.warning("could not parse %s: %s", uploaded_file.name, e)
            st.error(f"❌ Error reading file: {e}")

    else:
        st.info("👆 Please upload a table file, or use the built-in tables")

    st.subheader("Current Tables")
    for table_name, mapping in tables.items():
        with st.expander(f"{table_name} ({len(mapping)} pairs)"):
            st.dataframe(table_format.dump_table(mapping))

elif page == "Lookup":
    st.header("🔍 Lookup")

    table_name = st.selectbox("Table", list(tables))
    mapping = tables[table_name]

    col1, col2 = st.columns(2)
    with col1:
        direction = st.radio("Direction", ["key → value", "value → key"])
    with col2:
        modifier = st.selectbox("Modifier", ["identity"] + sorted(n for n in modifiers.transforms if n != "identity"))

    words = st.text_area("Words (one per line)", "ferry\nbus\ncar\nchurch\nbox")

    fn = mapping.value_for if direction == "key → value" else mapping.key_for
    tree = mapping.forward if direction == "key → value" else mapping.reverse

    rows = []
    for word in (w.strip() for w in words.splitlines()):
        if not word:
            continue
        match = tree.lookup(word)
        result = fn(word)
        rows.append({
            "input": word,
            "result": modifiers.transform(modifier, result) if result is not None else None,
            "pattern": mapping.pairs[match.index][0 if tree is mapping.forward else 1] if match else None,
            "captured": match.captured if match else None,
        })

    if rows:
        df = pd.DataFrame(rows)
        st.dataframe(df, use_container_width=True)
        misses = df["result"].isnull().sum()
        if misses:
            st.warning(f"⚠️ {misses} word(s) matched no pattern")

elif page == "Benchmark":
    st.header("📊 Benchmark")

    table_name = st.selectbox("Table", list(tables))
    mapping = tables[table_name]

    col1, col2, col3 = st.columns(3)
    with col1:
        max_size = st.select_slider("Largest workload", options=[1_000, 5_000, 10_000, 50_000], value=10_000)
    with col2:
        s_freq = st.slider("Suffix frequency", min_value=0.0, max_value=1.0, value=0.3)
    with col3:
        seed = st.number_input("Seed", value=42, step=1)

    if st.button("▶️ Run"):
        sizes = [int(s) for s in np.linspace(max_size / 5, max_size, 5)]
        with st.spinner("Timing lookups..."):
            results = run_benchmark(mapping, sizes, s_freq=s_freq, seed=int(seed))
            build = time_build(mapping.items())

        st.session_state['results'] = results
        st.session_state['build'] = build

    if 'results' in st.session_state:
        results = st.session_state['results']
        build = st.session_state['build']

        tab1, tab2, tab3 = st.tabs(["Lookup Cost", "Hit Rate", "Build"])

        with tab1:
            fig = px.line(results, x="size", y="mean_us", color="direction", markers=True,
                          title="Mean lookup time per word (µs)")
            st.plotly_chart(fig, use_container_width=True)
            st.dataframe(results)

        with tab2:
            fig_hits = px.bar(results, x="size", y="hit_rate", color="direction", barmode="group",
                              title="Share of words matching a pattern")
            st.plotly_chart(fig_hits, use_container_width=True)

        with tab3:
            st.metric("Build time (mean µs)", f"{build['mean_us']:.1f}")
            fig_build = go.Figure()
            fig_build.add_trace(go.Bar(
                x=["mean", "median", "p95"],
                y=[build["mean_us"], build["median_us"], build["p95_us"]],
                name="Build"
            ))
            fig_build.update_layout(title=f"Building {build['pairs']} pairs ({build['nodes']} nodes)",
                                    yaxis_title="µs")
            st.plotly_chart(fig_build, use_container_width=True)

    else:
        st.info("👆 Pick a table and press Run")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Pattern Trie Bench
    </div>
    """,
    unsafe_allow_html=True
)
