# %%
from polyfinder.selection import find_best_fit
from polyfinder.service import FitRequest, format_prediction, predict, train
from polyfinder.utility_functions import chart_data, random_points, random_points_text

# %%
text = random_points_text(seed=42)
print(text[:80], "...")

for method in ("BIC", "AIC"):
    response = train(FitRequest(text, auto=True, method=method))
    print(f"{method}: degree {response.degree}")
    print(f"  {response.formula}")
    print(f"  f(2.5) = {format_prediction(predict(response, 2.5))}")

# %%
points = random_points(seed=42)
result = find_best_fit(points, "BIC", verbose=2)
print(result.sweep)

chart = chart_data(points, result.model)
print(chart.head())
