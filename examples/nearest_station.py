"""
Example of finding the nearest bus stop to a device position.
"""

from stuvgeo import (
    GeodesyContext,
    compass_direction,
    convert_unit,
    distance_vincenty,
    find_nearest,
    to_sexagesimal,
)

STATIONS = {
    "rio-de-loba": {"name": "Rio de Loba", "latitude": 40.676032, "longitude": -7.923519},
    "rossio": {"name": "Rossio", "latitude": 40.681565, "longitude": -7.927381},
    "alberto-sampaio": {"name": "Av. Alberto Sampaio", "latitude": 40.696208, "longitude": -7.932960},
    "marzovelos": {"name": "Marzovelos", "latitude": 40.704472, "longitude": -7.949354},
}


def main():
    print("=" * 80)
    print("STUV Geodesy - Nearest Station Example")
    print("=" * 80)

    ctx = GeodesyContext()
    device = {"lat": "40° 40' 48\" N", "lng": "7° 55' 33.6\" W"}
    print(f"\nDevice position: {device['lat']}, {device['lng']}")

    nearest = find_nearest(device, STATIONS, context=ctx)
    station = STATIONS[nearest.key]
    direction = compass_direction(device, nearest.point, context=ctx)
    print(f"Nearest station: {station['name']}")
    print(f"  at {to_sexagesimal(nearest.latitude, axis='lat')}, "
          f"{to_sexagesimal(nearest.longitude, axis='lng')}")
    print(f"  {nearest.distance:.0f} m ({convert_unit('km', nearest.distance)} km) "
          f"towards {direction.exact}")

    print("\n" + "-" * 80)
    print("All stations by distance:")
    for ordered in find_nearest(device, STATIONS, limit=len(STATIONS), context=ctx):
        print(f"  {STATIONS[ordered.key]['name']:<22} {ordered.distance:>8.0f} m")

    print("\n" + "-" * 80)
    print("Line length Rio de Loba -> Marzovelos:")
    distance_vincenty(STATIONS["rio-de-loba"], STATIONS["marzovelos"], context=ctx)
    print(f"  {convert_unit('km', context=ctx)} km / {convert_unit('mi', context=ctx)} mi")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
