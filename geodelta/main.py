import sys

from .config import Colours
from .errors import GeohashError, InvalidPrecision, LocationLookupError
from .models import Coordinate
from .services.comparison import DistanceComparison, DistanceComparisonService
from .services.zip_lookup import ZipLookupService
from .utils.geo import round_metres, validate_accuracy, validate_coordinate
from .utils.logging import get_logger

logger = get_logger(__name__)

PROMPT_FORMS = "ZIP, City, STATE or lat,lon[,accuracy]"


def resolve_location(text: str, zip_service: ZipLookupService) -> Coordinate:
    """Turn a ZIP, a “City, STATE” or a literal “lat,lon[,accuracy]” into a Coordinate."""
    text = text.strip()
    if len(text) == 5 and text.isdigit():
        return zip_service.zip_to_coordinate(text)

    parts = [p.strip() for p in text.split(",")]
    if len(parts) in (2, 3):
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            numbers = None
        if numbers is not None:
            lat, lon = numbers[0], numbers[1]
            validate_coordinate(lat, lon)
            accuracy = None
            if len(numbers) == 3:
                accuracy = numbers[2]
                validate_accuracy(accuracy)
            return Coordinate(lat, lon, accuracy)

    logger.info("Resolving '%s' to a ZIP…", text)
    zip_code = zip_service.city_state_to_zip(text)
    if not zip_code:
        raise LocationLookupError(f"Could not resolve '{text}' to a ZIP code.")
    return zip_service.zip_to_coordinate(zip_code)


def parse_precision(text: str, default: int) -> int:
    text = text.strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        raise InvalidPrecision(f"precision must be an integer, got {text!r}") from None


def verdict(result: DistanceComparison, service: DistanceComparisonService) -> str:
    """Coloured one‑liner saying whether we are within the threshold."""
    metres = round_metres(result.true_distance)
    if service.within_threshold(result):
        return (
            f"{Colours.GREEN}You are within {service.threshold_meters:g} m "
            f"of the target ({metres} m).{Colours.RESET}"
        )
    return f"{Colours.RED}You are {metres} m away from the target.{Colours.RESET}"


def report(result: DistanceComparison, service: DistanceComparisonService) -> None:
    print(f"\nGeohash precision {result.precision}")
    print(f"\tYou:    {result.origin_hash} → center {result.origin_center}")
    print(f"\tTarget: {result.target_hash} → center {result.target_center}")
    print(f"True distance:    {round_metres(result.true_distance)} m")
    print(
        f"Geohash distance: {round_metres(result.geohash_distance)} m "
        f"({Colours.YELLOW}error {result.error:.1f} m{Colours.RESET})"
    )
    print(verdict(result, service))


def main() -> None:
    zip_service = ZipLookupService()
    service = DistanceComparisonService()

    # ------------------------------------------------------------------
    # 1️⃣ Where are we, and where are we going?
    # ------------------------------------------------------------------
    try:
        origin = resolve_location(input(f"Your location ({PROMPT_FORMS}): "), zip_service)
        print(f"Coordinates: {origin}")
        target = resolve_location(input(f"Target ({PROMPT_FORMS}): "), zip_service)
        print(f"Target: {target}")
        precision = parse_precision(
            input(f"Geohash precision [{service.precision}]: "), service.precision
        )
        result = service.compare(origin, target, precision)
    except (GeohashError, LocationLookupError) as exc:
        sys.exit(str(exc))

    # ------------------------------------------------------------------
    # 2️⃣ Report, then let the user cycle the precision
    # ------------------------------------------------------------------
    while True:
        report(result, service)
        nxt = service.next_precision(result.precision)
        try:
            answer = input(
                f"\n[Enter] precision {nxt}, 's' sweep all precisions, 'q' quit: "
            ).strip().lower()
        except EOFError:
            break

        if answer == "q":
            break
        if answer == "s":
            table = service.sweep(origin, target)
            print(table.to_string(index=False, float_format=lambda v: f"{v:.6g}"))
            continue
        result = service.compare(origin, target, nxt)


if __name__ == "__main__":
    main()
