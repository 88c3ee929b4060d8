import sys

from event_browser.core.dataset_loader import load_events, read_events_frame

path = sys.argv[1] if len(sys.argv) > 1 else "data/events.csv"

df = read_events_frame(path)
print("columns:", list(df.columns))
print("\nSample rows:")
print(df.head())

records = load_events(path)
print(f"\n{len(records)} records kept of {len(df)} rows")
print("months:", sorted({r.month for r in records}))
print("young/adult/senior:",
      sum(r.suitable_for_young for r in records),
      sum(r.suitable_for_adult for r in records),
      sum(r.suitable_for_senior for r in records))
