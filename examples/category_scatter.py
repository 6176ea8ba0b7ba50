"""Example: four categories, coloured and shaped by Tableau palettes."""

import matplotlib.pyplot as plt
import numpy as np

import tableau_plots as tp

rng = np.random.default_rng(7)

tp.apply("Tableau 10", shapes="filled")

fig, ax = plt.subplots()
for label in ["North", "South", "East", "West"]:
    x, y = rng.normal(size=(2, 30))
    ax.plot(x, y, linestyle="none", label=label)
ax.set_title("Regional Samples")
ax.legend()

fig.savefig("category-scatter.svg")
