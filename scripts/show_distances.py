import argparse
import csv
import logging

from dotenv import load_dotenv

from distances.service import DistanceService
from distances.storage import JsonFileStore, ReportCache
from geolocation.sensor import FixedLocationSensor, IPLocationSensor
from locations.models import TRAVEL_MODES


def print_progress(message: str, percent: float) -> None:
    print(f"[{percent:5.1f}%] {message}")


def write_csv(report, filename: str) -> None:
    with open(filename, mode='w', newline='') as file:
        writer = csv.writer(file)
        header = ["name", "address", "straight_line_miles"]
        for mode in TRAVEL_MODES:
            header += [f"{mode.value}_miles", f"{mode.value}_time"]
        writer.writerow(header)

        for entry in report.sites:
            row = [entry.site.name, entry.site.address, entry.straight_line_miles]
            for mode in TRAVEL_MODES:
                mode_distance = entry.for_mode(mode)
                row += [mode_distance.miles, mode_distance.human_time] if mode_distance else ["", ""]
            writer.writerow(row)


def main():
    parser = argparse.ArgumentParser(
        description="Distances and travel times from your location to every Denver rec center.")
    parser.add_argument("--lat", type=float, help="Use this latitude instead of an IP lookup.")
    parser.add_argument("--lon", type=float, help="Use this longitude instead of an IP lookup.")
    parser.add_argument("--refresh", action="store_true", help="Ignore the cached report.")
    parser.add_argument("--clear-cache", action="store_true", help="Delete the cached report and exit.")
    parser.add_argument("--cache-file", default=None, help="Where to keep the cached report.")
    parser.add_argument("--csv", default=None, help="Also write the report to this CSV file.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    load_dotenv()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    if args.lat is not None and args.lon is not None:
        sensor = FixedLocationSensor(args.lat, args.lon)
    else:
        sensor = IPLocationSensor()

    service = DistanceService(sensor=sensor, cache=ReportCache(JsonFileStore(args.cache_file)))

    if args.clear_cache:
        service.clear_cache()
        print("Cache cleared.")
        return

    result = service.get_distances(on_progress=print_progress, force_refresh=args.refresh)

    if result.error:
        print(f"Note: {result.error}")
    if result.data is None:
        return

    report = result.data
    print(f"\nSource: {result.source.value} | origin {report.origin[0]:.4f}, {report.origin[1]:.4f}\n")

    header = f"| {'Rec Center':<22} | {'Straight':>8} | {'Drive':>14} | {'Bike':>14} | {'Walk':>14} |"
    divider = "-" * len(header)
    print(header)
    print(divider)
    for entry in report.sites:
        cells = []
        for mode in TRAVEL_MODES:
            mode_distance = entry.for_mode(mode)
            if mode_distance is None or mode_distance.miles is None:
                cells.append("N/A")
            else:
                cells.append(f"{mode_distance.miles} mi {mode_distance.minutes}m")
        print(f"| {entry.site.name:<22} | {entry.straight_line_miles + ' mi':>8} | "
              f"{cells[0]:>14} | {cells[1]:>14} | {cells[2]:>14} |")
    print(divider)

    if args.csv:
        write_csv(report, args.csv)
        print(f"Results written to '{args.csv}'.")


if __name__ == "__main__":
    main()
