"""
Streamlit web interface for the option calculator.

Interactive UI with tabs for:
- Black-Scholes vs Monte Carlo pricing
- Greeks sensitivity
- Strategy payoff diagrams
"""

import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go

from optcalc.core.black_scholes import calculate_black_scholes
from optcalc.core.greeks import calculate_all_greeks, calculate_greeks
from optcalc.core.monte_carlo import run_monte_carlo
from optcalc.core.option import Option
from optcalc.strategies.payoffs import STRATEGIES
from optcalc.utils.exceptions import OptionCalculatorError
from optcalc.utils.types import (
    BlackScholesParams,
    Greek,
    GreeksParams,
    MonteCarloParams,
    OptionType,
)

st.set_page_config(page_title="Option Calculator", layout="wide")

st.title("Option Calculator")
st.markdown("European option pricing with Black-Scholes and Monte Carlo simulation")

# Sidebar parameters
st.sidebar.header("Option Parameters")
S = st.sidebar.number_input("Underlying Price (S)", value=100.0, min_value=0.01)
K = st.sidebar.number_input("Strike Price (K)", value=105.0, min_value=0.01)
T = st.sidebar.slider("Time to Expiry (years)", 0.01, 5.0, 0.5)
r = st.sidebar.slider("Risk-Free Rate (%)", 0.0, 20.0, 5.0) / 100
q = st.sidebar.slider("Dividend Yield (%)", 0.0, 10.0, 0.0) / 100
sigma = st.sidebar.slider("Volatility (%)", 1.0, 200.0, 30.0) / 100
option_type = OptionType(st.sidebar.selectbox("Option Type", [t.value for t in OptionType]))

tab1, tab2, tab3 = st.tabs(["Pricing", "Greeks Sensitivity", "Strategy Payoff"])

with tab1:
    st.header("Option Valuation")

    col1, col2 = st.columns(2)

    with col1:
        bs_price = calculate_black_scholes(BlackScholesParams(r, S, K, T, sigma, option_type))
        st.metric(label=f"Black-Scholes {option_type.value.capitalize()} Price", value=f"${bs_price:.4f}")

        greeks_vals = calculate_all_greeks(
            GreeksParams(r, S, K, T, sigma, option_type, dividend_yield=q)
        )

        st.subheader("Greeks")
        greeks_df = pd.DataFrame({
            "Greek": ["Delta", "Gamma", "Theta", "Vega", "Rho"],
            "Value": [
                f"{greeks_vals.delta:.6f}",
                f"{greeks_vals.gamma:.6f}",
                f"{greeks_vals.theta:.6f}",
                f"{greeks_vals.vega:.6f}",
                f"{greeks_vals.rho:.6f}"
            ],
            "Description": [
                "Price change per $1 underlying move",
                "Delta change per $1 underlying move",
                "Price change per year of decay",
                "Price change per unit of volatility",
                "Price change per unit of rate"
            ]
        })
        st.table(greeks_df)

    with col2:
        n_paths = st.number_input("Simulated Paths", value=50_000, min_value=1, step=10_000)
        seed = st.number_input("Seed", value=42, min_value=0, step=1)

        if st.button("Run Monte Carlo"):
            try:
                result = run_monte_carlo(
                    MonteCarloParams(int(n_paths), r, S, K, T, sigma, option_type),
                    seed=int(seed),
                )
            except OptionCalculatorError as e:
                st.error(f"Error: {e}")
            else:
                st.metric(
                    label="Monte Carlo Price",
                    value=f"${result.price:.4f}",
                    delta=f"{result.price - bs_price:+.4f} vs BS",
                )
                lower, upper = result.confidence_interval_95
                st.info(f"SE {result.std_error:.4f} | 95% CI [{lower:.4f}, {upper:.4f}] | {result.total_days} days")

with tab2:
    st.header("Greeks Sensitivity Analysis")

    spot_range = np.linspace(S*0.7, S*1.3, 50)

    for greek, color in ((Greek.DELTA, None), (Greek.GAMMA, "orange"), (Greek.VEGA, "green")):
        values = [
            calculate_greeks(GreeksParams(r, s, K, T, sigma, option_type, dividend_yield=q), greek)
            for s in spot_range
        ]
        label = greek.value.capitalize()

        fig = go.Figure()
        fig.add_trace(go.Scatter(x=spot_range, y=values, name=label, line=dict(color=color)))
        fig.update_layout(title=f"{label} vs Underlying Price", xaxis_title="Underlying Price", yaxis_title=label)
        st.plotly_chart(fig, use_container_width=True)

with tab3:
    st.header("Strategy Payoff at Expiry")

    name = st.selectbox("Strategy", sorted(STRATEGIES))
    width = st.number_input("Strike Width", value=10.0, min_value=0.01)
    premium = st.number_input("Premium per Leg", value=2.0, min_value=0.0)

    legs = {
        "put-spread": (Option(K + width, premium, OptionType.PUT), Option(K, premium, OptionType.PUT)),
        "call-spread": (Option(K, premium, OptionType.CALL), Option(K + width, premium, OptionType.CALL)),
        "butterfly": (
            Option(K - width, premium, OptionType.CALL),
            Option(K, premium, OptionType.CALL),
            Option(K + width, premium, OptionType.CALL),
        ),
        "strangle": (Option(K - width, premium, OptionType.PUT), Option(K + width, premium, OptionType.CALL)),
        "straddle": (Option(K, premium, OptionType.PUT), Option(K, premium, OptionType.CALL)),
    }[name]

    spots = np.linspace(max(K - 3 * width, 0.01), K + 3 * width, 200)
    payoffs = [STRATEGIES[name](*legs, s) for s in spots]

    fig_payoff = go.Figure()
    fig_payoff.add_trace(go.Scatter(x=spots, y=payoffs, name=name))
    fig_payoff.add_hline(y=0.0, line_dash="dot")
    fig_payoff.update_layout(title=f"{name} Payoff", xaxis_title="Spot at Expiry", yaxis_title="Net Payoff")
    st.plotly_chart(fig_payoff, use_container_width=True)
