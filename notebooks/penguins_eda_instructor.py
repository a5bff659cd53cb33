# Databricks notebook source
# MAGIC %md
# MAGIC # CSAI-382 – Exploratory Data Analysis with Palmer Penguins – Instructor Demo
# MAGIC
# MAGIC Welcome! This notebook is for **live coding**. We explore one small table of penguin measurements and build a short **data story**:
# MAGIC
# MAGIC > *Do heavier penguins have longer flippers? Is it the same for every species, island, and sex?*
# MAGIC
# MAGIC **Learning goals**
# MAGIC - ✅ Load a tidy dataset and check its columns
# MAGIC - ✅ Summarize every column (missing values, mean, spread)
# MAGIC - ✅ Group and aggregate with `groupby`
# MAGIC - ✅ Filter and sort a subset
# MAGIC - ✅ Build scatter plots with color, regression lines, and facets
# MAGIC - ✅ Add titles and subtitles so the chart tells the story
# MAGIC
# MAGIC *Tip:* Cells that start with `%md` are text. Cells without `%` are Python. Run them top to bottom.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 1. Setup & Imports
# MAGIC
# MAGIC - `pandas` for tables, `matplotlib` + `seaborn` for charts.
# MAGIC - `penguin_eda` holds the small helper functions we use today. Open the files and read them with students; each helper is a few lines of pandas.
# MAGIC - We turn on **logging** so every step leaves a note in `logs/`.
# COMMAND ----------
# INSTRUCTOR NOTE: Explain why we set seeds. Jitter adds random noise, and we want the same picture every run.
import logging
import random

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from penguin_eda import (
    adelie_subset,
    body_mass_stats_by_species_island,
    drop_missing,
    filter_equals,
    format_summary,
    load_config,
    load_penguins,
    mean_body_mass_by_species,
    sample_penguins,
    setup_logging,
    sort_by,
)
from penguin_eda.plots import bar_counts, facet_scatter, fit_ols, save_figure, scatter_mass_flipper

config = load_config()
log_path = setup_logging(config.log_dir, config.log_level)

random.seed(config.seed)
np.random.seed(config.seed)
sns.set_theme(style="whitegrid")

logging.info("Config: %s", config)
print("Environment ready ✅  Logs in", log_path)
# COMMAND ----------
# MAGIC %md
# MAGIC ## 2. Load the Data
# MAGIC
# MAGIC The Palmer penguins data has **one row per penguin**:
# MAGIC
# MAGIC | column | meaning |
# MAGIC |---|---|
# MAGIC | species | Adelie, Chinstrap, Gentoo |
# MAGIC | island | Biscoe, Dream, Torgersen |
# MAGIC | sex | female / male (sometimes missing) |
# MAGIC | bill_length_mm, bill_depth_mm | bill size |
# MAGIC | flipper_length_mm | flipper length |
# MAGIC | body_mass_g | weight in grams |
# MAGIC
# MAGIC seaborn ships a copy of the table. If the cluster has no internet, we fall back to a **small sample** with the same columns. The code below works the same either way.
# COMMAND ----------
# INSTRUCTOR NOTE: Ask students what could go wrong when loading data from the internet.
try:
    penguins = load_penguins()
except Exception as e:
    print("⚠️ Could not download the dataset, using the in-memory sample:", e)
    penguins = load_penguins(sample_penguins())

print("Loaded penguins with shape:", penguins.shape)
penguins.head()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 3. Inspect & Summarize
# MAGIC
# MAGIC `.info()` shows types and non-null counts. Our `format_summary` goes one step further: for each column it shows **missing values**, **complete rate**, and for numbers the **mean, sd, and quantiles** (p0 = min, p100 = max).
# MAGIC
# MAGIC 📃 Teaching Note: Ask students to read the `n_missing` column aloud. Which columns have gaps?
# COMMAND ----------
penguins.info()
print()
print(format_summary(penguins, title="All penguins"))
# COMMAND ----------
# MAGIC %md
# MAGIC 🚨 Common Mistake: Students think `.head()` proves the data is clean. It only shows five rows. The summary shows the two birds with **no measurements at all** and several with **unknown sex**.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 4. Group & Aggregate
# MAGIC
# MAGIC ### 4.1 Mean body mass by species
# MAGIC
# MAGIC Steps:
# MAGIC 1. Sort heaviest first (nice for looking, does **not** change the mean)
# MAGIC 2. Drop rows with missing body mass
# MAGIC 3. Group by species and take the mean
# COMMAND ----------
# INSTRUCTOR NOTE: Show the sorted table first, then the grouped result.
print(sort_by(penguins, "body_mass_g", ascending=False).head(10))

species_mass = mean_body_mass_by_species(penguins)
logging.info("Mean body mass by species:\n%s", species_mass)
species_mass
# COMMAND ----------
# MAGIC %md
# MAGIC ### 4.2 Body mass by species **and** island
# MAGIC
# MAGIC Two grouping keys give one row per (species, island) pair. We ask for four numbers: mean, max, min, and standard deviation.
# MAGIC
# MAGIC 💡 Teaching Note: pandas `std()` divides by **N − 1** (sample standard deviation). A group with only one bird has no spread, so sd is `NaN`.
# COMMAND ----------
mass_stats = body_mass_stats_by_species_island(penguins)
mass_stats
# COMMAND ----------
# Quick sanity checks: max >= mean >= min in every group
assert (mass_stats["max_body_mass_g"] >= mass_stats["mean_body_mass_g"]).all()
assert (mass_stats["mean_body_mass_g"] >= mass_stats["min_body_mass_g"]).all()
logging.info("Group stats checks passed")
# COMMAND ----------
# MAGIC %md
# MAGIC 🔎 **Look closely:** Adelie penguins live on all three islands. Are the Torgersen Adelies heavier or lighter than the others? Keep this question in mind.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 5. Filter & Sort: the Adelie subset
# MAGIC
# MAGIC We keep only `species == "Adelie"` and sort by island, then sex. This new table is our **adelie_subset**. We do not change `penguins`; we make a new table.
# COMMAND ----------
adelie = adelie_subset(penguins)
print("Adelie rows:", len(adelie))
print(format_summary(adelie, title="Adelie only"))
# COMMAND ----------
# MAGIC %md
# MAGIC ## 6. Scatter Plots: body mass vs. flipper length
# MAGIC
# MAGIC ### 6.1 The plain version
# MAGIC A first look. No color, no story yet.
# COMMAND ----------
fig = scatter_mass_flipper(penguins, title="Body mass vs. flipper length")
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ### 6.2 Color by species + one regression line per species
# MAGIC
# MAGIC The line is an **ordinary least squares** fit: the straight line with the smallest squared vertical distance to the points. We fit it only on birds that have both measurements.
# COMMAND ----------
fig = scatter_mass_flipper(
    penguins,
    color="species",
    fit_line=True,
    title="Heavier penguins have longer flippers",
    subtitle="Each species follows its own line",
)
save_figure(fig, "mass_flipper_by_species", config.output_dir)
plt.show()
# COMMAND ----------
# INSTRUCTOR NOTE: Print the slope so students see the number behind the line.
overall_fit = fit_ols(penguins)
print(f"Overall: +{overall_fit.slope * 1000:.1f} mm of flipper per extra kg (n={overall_fit.n})")
for name, group in penguins.groupby("species"):
    fit = fit_ols(group)
    if fit is not None:
        print(f"{name}: +{fit.slope * 1000:.1f} mm per kg (n={fit.n})")
# COMMAND ----------
# MAGIC %md
# MAGIC ### 6.3 Adelie only, colored by island
# MAGIC
# MAGIC Does the line look different on each island?
# COMMAND ----------
fig = scatter_mass_flipper(
    adelie,
    color="island",
    fit_line=True,
    title="Adelie penguins by island",
    subtitle="Is Torgersen different?",
)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ### 6.4 Facets: one panel per island
# MAGIC
# MAGIC A **facet** is a small chart for one group. Panels make it easier to compare than one crowded chart. Each panel has its own axis range.
# COMMAND ----------
fig = facet_scatter(
    adelie,
    cols="island",
    fit_line=True,
    title="Adelie: body mass vs. flipper length",
    subtitle="One panel per island",
)
save_figure(fig, "adelie_by_island", config.output_dir)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ### 6.5 Two-way facets: sex × island
# MAGIC
# MAGIC Rows = sex, columns = island. Now we compare males and females on each island.
# MAGIC
# MAGIC 🚨 Common Mistake: Birds with unknown sex do not appear in any row. Ask: "How many birds did we lose?"
# COMMAND ----------
fig = facet_scatter(
    adelie,
    cols="island",
    rows="sex",
    color="sex",
    fit_line=True,
    title="Adelie: sex × island",
    subtitle="Males are heavier on every island",
)
plt.show()

unknown_sex = adelie["sex"].isna().sum()
print("Adelie birds with unknown sex (not shown):", unknown_sex)
# COMMAND ----------
# MAGIC %md
# MAGIC ## 7. Females and Males Separately
# MAGIC
# MAGIC We filter by exact match. A filter that matches nothing gives an **empty table**, not an error.
# COMMAND ----------
female_adelie = filter_equals(adelie, "sex", "female")
male_adelie = filter_equals(adelie, "sex", "male")
print("Female Adelie:", len(female_adelie), " Male Adelie:", len(male_adelie))

fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))
scatter_mass_flipper(female_adelie, color="island", fit_line=True, ax=axes[0])
axes[0].set_title("Female")
scatter_mass_flipper(male_adelie, color="island", fit_line=True, ax=axes[1], title="Adelie by sex and island")
axes[1].set_title("Male")
plt.show()
# COMMAND ----------
# Empty filters are safe
no_birds = filter_equals(penguins, "island", "Atlantis")
print("Penguins on Atlantis:", len(no_birds))
# COMMAND ----------
# MAGIC %md
# MAGIC ## 8. How many birds per island?
# MAGIC
# MAGIC A bar chart of counts. We pick the colors **by hand** so each island keeps the same color in every chart of the presentation.
# COMMAND ----------
fig = bar_counts(
    adelie,
    "island",
    colors=config.island_colors,
    title="Adelie penguins per island",
    subtitle="Torgersen has the fewest birds",
)
save_figure(fig, "adelie_counts_by_island", config.output_dir)
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 9. Overplotting: jitter and transparency
# MAGIC
# MAGIC Many penguins have the **same** flipper length (measured to the nearest mm), so points sit on top of each other.
# MAGIC - **Jitter** moves each point a tiny random amount.
# MAGIC - **Alpha** (transparency) makes stacked points look darker.
# MAGIC
# MAGIC Regression lines are still fitted on the real values.
# COMMAND ----------
fig, axes = plt.subplots(1, 2, figsize=(12, 4.5), sharey=True)
scatter_mass_flipper(adelie, ax=axes[0])
axes[0].set_title("No jitter")
scatter_mass_flipper(
    adelie,
    ax=axes[1],
    jitter_width=config.jitter_width,
    jitter_height=config.jitter_height,
    alpha=config.alpha,
    seed=config.seed,
)
axes[1].set_title("Jitter + alpha")
plt.show()
# COMMAND ----------
# MAGIC %md
# MAGIC ## 10. Common Mistakes & Debugging
# MAGIC
# MAGIC 1. **Typos in column names** → `KeyError`.
# MAGIC 2. **Dropping missing rows too early** → we lose birds we could have used in other charts.
# MAGIC 3. **Sorting before grouping and expecting different means** → the mean does not care about order.
# COMMAND ----------
# INSTRUCTOR NOTE: Run the broken code first, ask students what the error means.
try:
    broken = penguins.groupby("specie")["body_mass_g"].mean()
    print(broken)
except KeyError as e:
    print("⚠️ Error happened:", e)

# Fixed
print(penguins.groupby("species")["body_mass_g"].mean())
# COMMAND ----------
# Dropping everything with any missing value vs. only what we need
all_complete = drop_missing(penguins)
mass_complete = drop_missing(penguins, ["body_mass_g"])
print("Rows if we drop on every column:", len(all_complete))
print("Rows if we drop only on body_mass_g:", len(mass_complete))
# COMMAND ----------
# MAGIC %md
# MAGIC ## 11. Simple Tests with Asserts
# MAGIC
# MAGIC `assert` stops the notebook when something is wrong. Break one on purpose to show the error.
# COMMAND ----------
assert set(adelie["species"]) <= {"Adelie"}, "adelie_subset has other species"
assert filter_equals(adelie, "species", "Adelie").equals(adelie), "filtering twice changed the table"
assert drop_missing(all_complete).equals(all_complete), "drop_missing is not idempotent"
assert sort_by(adelie, ["island", "sex"]).equals(adelie), "sorting twice changed the order"

manual_means = penguins.dropna(subset=["body_mass_g"]).groupby("species")["body_mass_g"].mean()
for _, row in species_mass.iterrows():
    assert np.isclose(row["mean_body_mass_g"], manual_means[row["species"]])

logging.info("All simple assert tests passed")
# COMMAND ----------
# MAGIC %md
# MAGIC ## 12. Data Story & Ethics
# MAGIC
# MAGIC - Across all penguins: **heavier → longer flippers**.
# MAGIC - Within Adelie, the Torgersen group looks different. One idea: the environment on Torgersen. But this is a **guess**, not a fact. We have few birds there and some are missing measurements.
# MAGIC - Good data stories say what we saw **and** what we do not know.
# MAGIC
# MAGIC **Gospel thought:** "Seek learning, even by study and also by faith." (D&C 88:118) Careful, honest charts respect the people (and penguins!) behind the data.
# COMMAND ----------
# MAGIC %md
# MAGIC ## 13. 🧪 Try It Yourself
# MAGIC
# MAGIC **Challenge 1:** Make the species scatter for **bill length** instead of flipper length. (Hint: use seaborn directly.)
# MAGIC
# MAGIC **Challenge 2:** Repeat the island facet for **Gentoo**. How many panels do you get, and why?
# MAGIC
# MAGIC **Challenge 3:** Compute mean body mass by species **and sex**.
# MAGIC
# MAGIC *Instructor tip:* Pause after each challenge. Let students edit and run.
# COMMAND ----------
# INSTRUCTOR SOLUTION: Challenge 1
plt.figure(figsize=(8, 5))
sns.scatterplot(data=penguins, x="body_mass_g", y="bill_length_mm", hue="species", alpha=0.7)
plt.title("Body mass vs. bill length")
plt.tight_layout()
plt.show()
# COMMAND ----------
# INSTRUCTOR SOLUTION: Challenge 2
gentoo = filter_equals(penguins, "species", "Gentoo")
fig = facet_scatter(gentoo, cols="island", fit_line=True, title="Gentoo by island")
plt.show()
print("Gentoo islands:", sorted(gentoo["island"].unique()))
# COMMAND ----------
# INSTRUCTOR SOLUTION: Challenge 3
by_species_sex = (
    drop_missing(penguins, ["species", "sex", "body_mass_g"])
    .groupby(["species", "sex"])["body_mass_g"]
    .mean()
    .reset_index()
)
by_species_sex
# COMMAND ----------
# MAGIC %md
# MAGIC ## 14. Summary & Key Takeaways
# MAGIC
# MAGIC - Summaries first: know your missing values before you plot.
# MAGIC - `groupby` + `mean/min/max/std` answers "how do groups differ?"
# MAGIC - Filters and sorts make **new** tables; the original stays the same.
# MAGIC - Color, regression lines, and facets turn a cloud of points into a story.
# MAGIC - Titles and subtitles tell the reader what to look for.
# MAGIC
# MAGIC Keep experimenting! ✅
