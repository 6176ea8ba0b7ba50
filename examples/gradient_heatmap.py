"""Example: sequential and diverging Tableau gradients side by side."""

import matplotlib.pyplot as plt
import numpy as np

import tableau_plots as tp

x = np.linspace(-3, 3, 120)
field = np.sin(x)[:, None] * np.cos(x)[None, :]
field[40:50, 40:50] = np.nan  # drawn in the colormap's NA colour

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 4))

ax1.imshow(np.abs(field), cmap=tp.scale_colour_gradient_tableau("Blue-Teal"))
ax1.set_title("Blue-Teal")

ax2.imshow(field, cmap=tp.scale_colour_gradient2_tableau("Orange-Blue Diverging"))
ax2.set_title("Orange-Blue Diverging")

fig.savefig("gradient-heatmap.svg")
