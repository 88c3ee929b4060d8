import numpy as np
import pandas as pd
from pathlib import Path

n_events = 60
rng = np.random.default_rng(7)

months = ["January", "February", "March", "April", "May", "June",
          "July", "August", "September", "October", "November", "December"]
kinds = ["Festival", "Market", "Concert", "Workshop", "Parade", "Exhibition", "Fair"]

components = {
    "bus_proximity_score": rng.uniform(0, 1, n_events),
    "parking_proximity_score": rng.uniform(0, 1, n_events),
    "traffic_score": rng.uniform(0, 1, n_events),
    "cost_score": rng.uniform(0, 1, n_events),
    "complexity_score": rng.uniform(0, 1, n_events),
    "activity_score": rng.uniform(0, 1, n_events),
    "age_diversity_score": rng.uniform(0, 1, n_events),
}

df = pd.DataFrame(
    {
        "event_id": [f"EV{i:04d}" for i in range(1, n_events + 1)],
        "name": [f"{rng.choice(['Harbour', 'Old Town', 'Riverside', 'Park'])} {rng.choice(kinds)} {i}"
                 for i in range(1, n_events + 1)],
        "month": rng.choice(months, size=n_events),
        "cost": rng.choice(["free", "low_cost", "paid"], size=n_events),
        "activity_level": rng.choice(["low", "moderate", "high"], size=n_events),
        "complexity": rng.choice(["simple", "moderate", "complex"], size=n_events),
        "noise_level": rng.choice(["quiet", "moderate", "loud"], size=n_events),
        "cultural_type": rng.choice(["music", "arts", "food", "heritage"], size=n_events),
        "audience_scope": rng.choice(["local", "regional", "international"], size=n_events),
        **components,
        # Mixed encodings on purpose: the loader normalises them
        "suitable_for_young": rng.choice(np.array([True, False, "True", "False", 1, 0], dtype=object), size=n_events),
        "suitable_for_adult": rng.choice(np.array([True, "True", 1], dtype=object), size=n_events),
        "suitable_for_senior": rng.choice(np.array([True, False, "True", 0], dtype=object), size=n_events),
        "latitude": rng.uniform(44.60, 44.70, n_events),
        "longitude": rng.uniform(-63.65, -63.50, n_events),
        "nearest_bus_stop_km": rng.uniform(0.05, 2.0, n_events),
        "nearest_parking_lot_name": rng.choice(["Lot A", "Waterfront Garage", "Library Lot"], size=n_events),
        "nearest_parking_lot_km": rng.uniform(0.05, 3.0, n_events),
    }
)
df["inclusivity_score_100"] = (pd.DataFrame(components).mean(axis=1) * 100).round(2)

# A couple of rows without an id; they are dropped at load
df.loc[n_events - 2:, "event_id"] = None

Path("data").mkdir(exist_ok=True)
df.to_csv("data/events.csv", index=False)
print("wrote data/events.csv", df.shape)
