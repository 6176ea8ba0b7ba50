"""Example: a sequential palette used as a discrete, reversed bar cycle."""

import matplotlib.pyplot as plt
import numpy as np

import tableau_plots as tp

quarters = np.arange(4)
years = ["2021", "2022", "2023", "2024", "2025"]

fig, ax = plt.subplots()
ax.set_prop_cycle(tp.scale_colour_tableau("Blue", n=len(years), type="ordered-sequential", direction=-1))

width = 0.8 / len(years)
for i, year in enumerate(years):
    ax.bar(quarters + i * width, np.linspace(1, 2, 4) * (i + 1), width=width, label=year)
ax.set_xticks(quarters + 0.4 - width / 2, ["Q1", "Q2", "Q3", "Q4"])
ax.legend()

fig.savefig("reversed-bars.svg")
