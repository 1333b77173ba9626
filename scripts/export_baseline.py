import pandas as pd
import os
import sys

# Add project root to path to import the package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from crowdpark.simulation import build_universe

def export_baseline(output_dir="data/baseline"):
    print("Generating baseline universe...")
    universe = build_universe()

    # 1. Mesh counts, one row per (cell, slot)
    mesh_rows = []
    for cell in universe.cells:
        for index, label in enumerate(universe.time_slots):
            mesh_rows.append({
                "cell_id": cell.id,
                "row": cell.row,
                "col": cell.col,
                "lat": round(cell.center[0], 6),
                "lng": round(cell.center[1], 6),
                "zone": cell.label,
                "slot": label,
                "count": cell.counts[index],
            })

    # 2. Parking series, one row per (lot, slot)
    parking_rows = []
    for lot in universe.lots:
        for index, label in enumerate(universe.time_slots):
            parking_rows.append({
                "lot_id": lot.id,
                "name": lot.name,
                "lat": round(lot.position[0], 6),
                "lng": round(lot.position[1], 6),
                "capacity": lot.capacity,
                "is_core": lot.is_core,
                "slot": label,
                "occupancy": round(lot.occupancy[index], 4),
                "price": lot.price[index],
            })

    df_mesh = pd.DataFrame(mesh_rows)
    df_parking = pd.DataFrame(parking_rows)

    print(df_mesh.head())
    print(df_parking.head())

    # Ensure output directory exists
    os.makedirs(output_dir, exist_ok=True)

    mesh_path = os.path.join(output_dir, "mesh_counts.csv")
    parking_path = os.path.join(output_dir, "parking_series.csv")
    df_mesh.to_csv(mesh_path, index=False)
    df_parking.to_csv(parking_path, index=False)
    print(f"Mesh saved to {mesh_path} ({len(df_mesh)} rows)")
    print(f"Parking saved to {parking_path} ({len(df_parking)} rows)")

if __name__ == "__main__":
    export_baseline()
