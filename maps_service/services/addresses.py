import random
from maps_service.schemas.address import Address

ADDRESSES = [
    Address(address="777 Brockton Avenue", city="Abington", state="MA", zip="02351"),
    Address(address="30 Memorial Drive", city="Avon", state="MA", zip="02322"),
    Address(address="250 Hartford Avenue", city="Bellingham", state="MA", zip="02019"),
    Address(address="700 Oak Street", city="Brockton", state="MA", zip="02301"),
    Address(address="66-4 Parkhurst Road", city="Chelmsford", state="MA", zip="01824"),
    Address(address="591 Memorial Drive", city="Chicopee", state="MA", zip="01020"),
    Address(address="55 Brooksby Village Way", city="Danvers", state="MA", zip="01923"),
    Address(address="137 Teaticket Highway", city="East Falmouth", state="MA", zip="02536"),
    Address(address="42 Fairhaven Commons Way", city="Fairhaven", state="MA", zip="02719"),
    Address(address="374 William S Canning Boulevard", city="Fall River", state="MA", zip="02721"),
]


def resolve_address(lat: float, lon: float) -> Address:
    """Pick one of the canned addresses for a coordinate pair.

    The choice is seeded from the coordinates, so a pair always maps to the
    same address while different pairs spread across the list.
    """
    rng = random.Random(f"{lat:.6f},{lon:.6f}")
    return ADDRESSES[rng.randrange(len(ADDRESSES))]
