"""
Static lookup tables for Visakhapatnam localities.

- AREA_COORDINATES: approximate centre of each named area
- AREA_CRIME_TYPES: primary crime category observed per area
- STREET_LOCATIONS: street-level hotspots within an area

Tables are read-only mappings. Callers that need a different table (tests,
other cities) inject their own mapping instead of mutating these.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from .models import CrimeType, Point


class StreetLocation(NamedTuple):
    street: str
    point: Point
    crime_types: Tuple[CrimeType, ...] = ()


AREA_COORDINATES: Mapping[str, Point] = MappingProxyType({
    'Gajuwaka': Point(17.7047, 83.2113),
    'Gopalapatnam': Point(17.7458, 83.2614),
    'Dwaraka Nagar': Point(17.7242, 83.3059),
    'MVP Colony': Point(17.7367, 83.2851),
    'Kancharapalem': Point(17.7180, 83.2760),
    'Madhurawada': Point(17.7833, 83.3667),
    'Pendurthi': Point(17.7909, 83.2467),
    'Seethammadhara': Point(17.7305, 83.2987),
    'Simhachalam': Point(17.7667, 83.2500),
    'Visakhapatnam Steel Plant Area': Point(17.6403, 83.1638),
    'Akkayyapalem': Point(17.7294, 83.2935),
    'Arilova': Point(17.7633, 83.3083),
    'Lawsons Bay': Point(17.7200, 83.3400),
    'Beach Road': Point(17.7050, 83.3217),
    'Jagadamba': Point(17.7142, 83.3017),
    'Railway New Colony': Point(17.7100, 83.2900),
    'One Town': Point(17.6967, 83.2917),
    'CBM Compound': Point(17.6900, 83.2850),
    'Allipuram': Point(17.7058, 83.2942),
    'Dabagardens': Point(17.7283, 83.3017),
    'Pothinamallayya Palem': Point(17.7450, 83.2750),
    'Kurmannapalem': Point(17.7550, 83.2350),
    'Naidu Thota': Point(17.7025, 83.2958),
    'Waltair': Point(17.7217, 83.3200),
    'Kirlampudi': Point(17.7333, 83.3233),
    'Rushikonda': Point(17.7689, 83.3842),
    'NAD Junction': Point(17.7283, 83.2533),
    'Isukathota': Point(17.7700, 83.3700),
    'Kommadi': Point(17.8000, 83.3850),
    'PM Palem': Point(17.7550, 83.3650),
    'Yendada': Point(17.7833, 83.3833),
    'Sagar Nagar': Point(17.7617, 83.3533),
    'Thatichetlapalem': Point(17.7383, 83.2933),
    'Bheemunipatnam': Point(17.8908, 83.4528),
    'Anakapalli': Point(17.6914, 83.0042),
    'Pedagantyada': Point(17.7583, 83.2833),
    'Chinagadili': Point(17.8167, 83.4000),
    'Gnanapuram': Point(17.7175, 83.3100),
    'Maharanipeta': Point(17.7050, 83.3050),
    'Siripuram': Point(17.7200, 83.3150),
    'Dondaparthy': Point(17.7517, 83.2967),
    'Murali Nagar': Point(17.7400, 83.2800),
    'Ramnagar': Point(17.7133, 83.2867),
    'Peda Waltair': Point(17.7267, 83.3267),
    'Chinna Waltair': Point(17.7183, 83.3317),
    'RK Beach': Point(17.7117, 83.3283),
    'Kailasapuram': Point(17.7583, 83.2617),
    'Gidijala': Point(17.7950, 83.3050),
    'Marripalem': Point(17.7750, 83.3600),
    'Hanumanthawaka': Point(17.6850, 83.2783),
    'Malkapuram': Point(17.7100, 83.2200),
    'Nathayyapalem': Point(17.6950, 83.2650),
    'Kommadi Junction': Point(17.8050, 83.3900),
    'Timmapuram': Point(17.8200, 83.4100),
    'Lankelapalem': Point(17.8350, 83.4200),
    'Sriharipuram': Point(17.7350, 83.2700),
    'HB Colony': Point(17.7450, 83.3050),
    'Jodugullapalem': Point(17.7600, 83.3950),
    # Street-survey areas without a surveyed centre use their main hotspot
    'Akkayapalem': Point(17.7347, 83.2977),
    'Anandapuram': Point(17.9000, 83.3700),
    'Andhra University': Point(17.7320, 83.3190),
    'Balayya Sastri Layout': Point(17.7250, 83.3050),
    'Bhogapuram': Point(18.0300, 83.4900),
    'Boyapalem': Point(17.7312, 83.2859),
    'Daspalla Hills': Point(17.7220, 83.3100),
    'Ghat Road': Point(17.7650, 83.2380),
    'Maddilapalem': Point(17.7382, 83.3230),
    'Marikavalasa': Point(17.8359, 83.3581),
    'Poorna Market': Point(17.7064, 83.2982),
    'Port Area': Point(17.6950, 83.2850),
    'RTC Complex': Point(17.7200, 83.3100),
    'Scindia': Point(17.7150, 83.2900),
    'Sheela Nagar': Point(17.7190, 83.2020),
    'Steel Plant Township': Point(17.6100, 83.1900),
    'Tagarapuvalasa': Point(17.9301, 83.4257),
    'Venkojipalem': Point(17.7100, 83.2920),
    'Vishalakshinagar': Point(17.7350, 83.3200),
    'Vizianagaram': Point(18.1067, 83.3956),
})


AREA_CRIME_TYPES: Mapping[str, CrimeType] = MappingProxyType({
    # Critical areas
    'Gajuwaka': CrimeType.ROBBERY,
    'Dwaraka Nagar': CrimeType.THEFT,
    'Jagadamba Junction': CrimeType.ROBBERY,
    'MVP Colony': CrimeType.ASSAULT,
    'Simhachalam': CrimeType.ACCIDENT,
    'Maddilapalem': CrimeType.HARASSMENT,
    'Anandapuram': CrimeType.KIDNAP,
    # High risk areas
    'Marripalem': CrimeType.THEFT,
    'One Town': CrimeType.ROBBERY,
    'Steel Plant Township': CrimeType.ASSAULT,
    'Lawsons Bay Colony': CrimeType.HARASSMENT,
    'Vizianagaram': CrimeType.MURDER,
    'Rushikonda': CrimeType.ACCIDENT,
    # Moderate risk areas
    'Anakapalli': CrimeType.THEFT,
    'Beach Road': CrimeType.ACCIDENT,
    'Pendurthi': CrimeType.ROBBERY,
    'Madhurawada': CrimeType.ACCIDENT,
    'Akkayapalem': CrimeType.ACCIDENT,
    'Kancharapalem': CrimeType.THEFT,
    'Poorna Market': CrimeType.THEFT,
    'Yendada': CrimeType.ACCIDENT,
    'PM Palem': CrimeType.HARASSMENT,
    'NAD Junction': CrimeType.ACCIDENT,
    'Malkapuram': CrimeType.ASSAULT,
    'Bheemunipatnam': CrimeType.ACCIDENT,
    'Seethammadhara': CrimeType.HARASSMENT,
    'Arilova': CrimeType.THEFT,
    'Sheela Nagar': CrimeType.ROBBERY,
    'Marikavalasa': CrimeType.ACCIDENT,
    'Bhogapuram': CrimeType.ACCIDENT,
})


STREET_LOCATIONS: Mapping[str, Tuple[StreetLocation, ...]] = MappingProxyType({
    'Akkayapalem': (
        StreetLocation('NH16 Highway', Point(17.7347, 83.2977), (CrimeType.ACCIDENT,)),
        StreetLocation('Colony Main Road', Point(17.7370, 83.3000), (CrimeType.THEFT, CrimeType.MURDER)),
        StreetLocation('Akkayapalem Junction', Point(17.7330, 83.2950), (CrimeType.KIDNAP, CrimeType.ROBBERY)),
    ),
    'Allipuram': (
        StreetLocation('Jalaripeta Road', Point(17.7162, 83.2965), (CrimeType.KIDNAP, CrimeType.MURDER)),
        StreetLocation('Allipuram Main', Point(17.7180, 83.2980), (CrimeType.ROBBERY,)),
    ),
    'Anakapalli': (
        StreetLocation('Town Center', Point(17.6890, 83.0035), (CrimeType.MURDER, CrimeType.ROBBERY)),
        StreetLocation('Ring Road', Point(17.6946, 83.0086), (CrimeType.ACCIDENT,)),
        StreetLocation('Bus Stand Area', Point(17.6875, 82.9980), (CrimeType.THEFT, CrimeType.ASSAULT)),
        StreetLocation('Railway Station Road', Point(17.6920, 83.0050), (CrimeType.KIDNAP,)),
        StreetLocation('Market Road', Point(17.6860, 83.0010), (CrimeType.ROBBERY, CrimeType.ACCIDENT)),
    ),
    'Anandapuram': (
        StreetLocation('Anandapuram Bypass', Point(17.9000, 83.3700), (CrimeType.KIDNAP, CrimeType.ROBBERY)),
        StreetLocation('Main Road', Point(17.8980, 83.3680), (CrimeType.ACCIDENT, CrimeType.MURDER)),
        StreetLocation('Junction Area', Point(17.9020, 83.3720), (CrimeType.ASSAULT,)),
    ),
    'Andhra University': (
        StreetLocation('AU Campus Road', Point(17.7320, 83.3190), (CrimeType.MURDER,)),
        StreetLocation('Engineering College', Point(17.7300, 83.3170), (CrimeType.THEFT,)),
    ),
    'Arilova': (
        StreetLocation('Hanumantha Junction', Point(17.7673, 83.3134), (CrimeType.THEFT, CrimeType.KIDNAP)),
        StreetLocation('Main Road', Point(17.7690, 83.3150), (CrimeType.ACCIDENT,)),
        StreetLocation('Arilova Center', Point(17.7660, 83.3120), (CrimeType.ASSAULT,)),
    ),
    'Balayya Sastri Layout': (
        StreetLocation('Layout Main Road', Point(17.7250, 83.3050), (CrimeType.ACCIDENT,)),
    ),
    'Beach Road': (
        StreetLocation('RK Beach', Point(17.7215, 83.3150), (CrimeType.ACCIDENT, CrimeType.ASSAULT)),
        StreetLocation('Kali Temple Area', Point(17.7180, 83.3120), (CrimeType.KIDNAP,)),
        StreetLocation('Dolphin Hill', Point(17.7250, 83.3170), (CrimeType.MURDER,)),
        StreetLocation('VUDA Park', Point(17.7290, 83.3190), (CrimeType.ACCIDENT,)),
    ),
    'Bheemunipatnam': (
        StreetLocation('Beach Road', Point(17.8900, 83.4500), (CrimeType.ACCIDENT,)),
        StreetLocation('Town Center', Point(17.8920, 83.4520), (CrimeType.ASSAULT,)),
        StreetLocation('Temple Area', Point(17.8880, 83.4480), (CrimeType.MURDER,)),
    ),
    'Bhogapuram': (
        StreetLocation('Airport Road', Point(18.0300, 83.4900), (CrimeType.ACCIDENT,)),
        StreetLocation('Village Center', Point(18.0280, 83.4880), (CrimeType.ACCIDENT,)),
    ),
    'Boyapalem': (
        StreetLocation('Boyapalem Main', Point(17.7312, 83.2859), (CrimeType.ACCIDENT,)),
        StreetLocation('Junction Road', Point(17.7295, 83.2840), (CrimeType.ACCIDENT,)),
    ),
    'Chinna Waltair': (
        StreetLocation('AU Out Gate', Point(17.7280, 83.3200), (CrimeType.ACCIDENT,)),
        StreetLocation('Beach Road Junction', Point(17.7260, 83.3180), (CrimeType.THEFT,)),
    ),
    'Dabagardens': (
        StreetLocation('Prakashrao Junction', Point(17.7150, 83.3050), (CrimeType.ASSAULT, CrimeType.MURDER)),
        StreetLocation('Main Road', Point(17.7170, 83.3070), (CrimeType.THEFT,)),
    ),
    'Daspalla Hills': (
        StreetLocation('Daspalla Hotel Area', Point(17.7220, 83.3100), (CrimeType.KIDNAP,)),
    ),
    'Dwaraka Nagar': (
        StreetLocation('Dwaraka Nagar Road', Point(17.7287, 83.3086), (CrimeType.ASSAULT, CrimeType.KIDNAP)),
        StreetLocation('Siripuram Junction', Point(17.7260, 83.3050), (CrimeType.ASSAULT,)),
        StreetLocation('CMR Central', Point(17.7310, 83.3110), (CrimeType.ROBBERY,)),
        StreetLocation('Main Road', Point(17.7295, 83.3070), (CrimeType.ACCIDENT,)),
    ),
    'Dwarakanagar': (
        StreetLocation('Dwarakanagar Main', Point(17.7287, 83.3086), (CrimeType.ACCIDENT,)),
    ),
    'Gajuwaka': (
        StreetLocation('NAD-Gajuwaka Road', Point(17.6853, 83.2037), (CrimeType.ACCIDENT,)),
        StreetLocation('Old Gajuwaka', Point(17.6820, 83.2010), (CrimeType.MURDER,)),
        StreetLocation('Steel Plant Junction', Point(17.6880, 83.2070), (CrimeType.ACCIDENT,)),
        StreetLocation('Autonagar', Point(17.6790, 83.1980), (CrimeType.ROBBERY, CrimeType.ASSAULT)),
        StreetLocation('Kurmannapalem Junction', Point(17.6910, 83.2100), (CrimeType.KIDNAP,)),
    ),
    'Ghat road': (
        StreetLocation('Simhachalam Ghat', Point(17.7650, 83.2380), (CrimeType.ACCIDENT,)),
    ),
    'Gopalapatnam': (
        StreetLocation('Baji Junction', Point(17.7550, 83.2700), (CrimeType.ROBBERY,)),
        StreetLocation('Main Road', Point(17.7530, 83.2680), (CrimeType.THEFT,)),
    ),
    'Jagadamba Junction': (
        StreetLocation('Jagadamba Circle', Point(17.7105, 83.2980), (CrimeType.ACCIDENT, CrimeType.ROBBERY)),
        StreetLocation('CMR Road', Point(17.7090, 83.2960), (CrimeType.KIDNAP,)),
        StreetLocation('Shopping Complex', Point(17.7120, 83.3000), (CrimeType.ASSAULT,)),
        StreetLocation('Cinema Road', Point(17.7080, 83.2940), (CrimeType.MURDER,)),
    ),
    'Kancharapalem': (
        StreetLocation('Market Area', Point(17.7354, 83.2738), (CrimeType.ROBBERY, CrimeType.MURDER)),
        StreetLocation('Junction Road', Point(17.7380, 83.2760), (CrimeType.ASSAULT, CrimeType.KIDNAP)),
        StreetLocation('Temple Street', Point(17.7330, 83.2720), (CrimeType.ACCIDENT,)),
        StreetLocation('Old Kancharapalem', Point(17.7360, 83.2750), (CrimeType.MURDER,)),
    ),
    'Kommadhi': (
        StreetLocation('Kommadi Junction', Point(17.8100, 83.3800), (CrimeType.ACCIDENT, CrimeType.MURDER)),
        StreetLocation('IT Corridor', Point(17.8080, 83.3780), (CrimeType.THEFT,)),
    ),
    'Kurmannapalem': (
        StreetLocation('Steel Plant Road', Point(17.6900, 83.1700), (CrimeType.ACCIDENT,)),
        StreetLocation('Junction', Point(17.6880, 83.1720), (CrimeType.MURDER,)),
    ),
    'Lawsons Bay Colony': (
        StreetLocation('Lawsons Bay Road', Point(17.7300, 83.3300), (CrimeType.ASSAULT, CrimeType.KIDNAP)),
        StreetLocation('Beach Side', Point(17.7320, 83.3320), (CrimeType.ROBBERY,)),
        StreetLocation('Colony Main', Point(17.7280, 83.3280), (CrimeType.ACCIDENT,)),
        StreetLocation('Residential Area', Point(17.7290, 83.3290), (CrimeType.MURDER,)),
    ),
    'Maddilapalem': (
        StreetLocation('Maddilapalem Road', Point(17.7382, 83.3230), (CrimeType.KIDNAP, CrimeType.MURDER)),
        StreetLocation('Housing Board', Point(17.7360, 83.3210), (CrimeType.ASSAULT,)),
        StreetLocation('Main Junction', Point(17.7400, 83.3250), (CrimeType.ACCIDENT,)),
        StreetLocation('Inner Colony', Point(17.7375, 83.3220), (CrimeType.ROBBERY,)),
    ),
    'Madhurawada': (
        StreetLocation('NH16 Highway', Point(17.7957, 83.3756), (CrimeType.ACCIDENT,)),
        StreetLocation('APHB Colony', Point(17.8056, 83.3705), (CrimeType.MURDER,)),
        StreetLocation('IT Park Junction', Point(17.7980, 83.3780), (CrimeType.ASSAULT,)),
    ),
    'Malkapuram': (
        StreetLocation('Malkapuram Road', Point(17.6880, 83.2450), (CrimeType.ASSAULT, CrimeType.MURDER)),
        StreetLocation('Junction Area', Point(17.6900, 83.2470), (CrimeType.ROBBERY,)),
    ),
    'Marikavalasa': (
        StreetLocation('NH16 Highway', Point(17.8359, 83.3581), (CrimeType.ACCIDENT,)),
        StreetLocation('Junction', Point(17.8340, 83.3560), (CrimeType.ACCIDENT,)),
    ),
    'Marripalem': (
        StreetLocation('Airport Road', Point(17.7400, 83.2500), (CrimeType.ACCIDENT, CrimeType.ROBBERY)),
        StreetLocation('VUDA Layout', Point(17.7420, 83.2530), (CrimeType.ASSAULT, CrimeType.KIDNAP)),
        StreetLocation('Colony Area', Point(17.7380, 83.2470), (CrimeType.MURDER,)),
    ),
    'MVP Colony': (
        StreetLocation('MVP Double Road', Point(17.7407, 83.3367), (CrimeType.ASSAULT, CrimeType.ROBBERY)),
        StreetLocation('Sector 1', Point(17.7420, 83.3340), (CrimeType.MURDER,)),
        StreetLocation('Sector 6', Point(17.7390, 83.3390), (CrimeType.ACCIDENT,)),
        StreetLocation('Pandurangapuram', Point(17.7380, 83.3350), (CrimeType.ASSAULT,)),
    ),
    'NAD Junction': (
        StreetLocation('NAD Flyover', Point(17.7400, 83.2300), (CrimeType.ACCIDENT,)),
        StreetLocation('Kotha Road', Point(17.7420, 83.2320), (CrimeType.MURDER,)),
    ),
    'One Town': (
        StreetLocation('Town Kotha Road', Point(17.7000, 83.2900), (CrimeType.ASSAULT, CrimeType.KIDNAP)),
        StreetLocation('Market Street', Point(17.7020, 83.2920), (CrimeType.ROBBERY,)),
        StreetLocation('Fish Market', Point(17.6980, 83.2880), (CrimeType.ACCIDENT,)),
        StreetLocation('Old Town', Point(17.7010, 83.2910), (CrimeType.MURDER,)),
    ),
    'Pendurthi': (
        StreetLocation('Vepagunta Junction', Point(17.7800, 83.2600), (CrimeType.MURDER,)),
        StreetLocation('Bus Station', Point(17.7820, 83.2620), (CrimeType.ACCIDENT,)),
        StreetLocation('Market Road', Point(17.7780, 83.2580), (CrimeType.KIDNAP, CrimeType.ROBBERY)),
    ),
    'PM Palem': (
        StreetLocation('Vasundhara Nagar', Point(17.7996, 83.3531), (CrimeType.ACCIDENT,)),
        StreetLocation('Main Road', Point(17.8010, 83.3550), (CrimeType.ACCIDENT,)),
    ),
    'Poorna Market': (
        StreetLocation('Market Road', Point(17.7064, 83.2982), (CrimeType.ROBBERY, CrimeType.KIDNAP)),
        StreetLocation('Old Town', Point(17.7050, 83.2960), (CrimeType.MURDER,)),
        StreetLocation('Main Bazaar', Point(17.7080, 83.3000), (CrimeType.ASSAULT,)),
    ),
    'Port Area': (
        StreetLocation('Port Gate', Point(17.6950, 83.2850), (CrimeType.KIDNAP,)),
        StreetLocation('Harbour Road', Point(17.6930, 83.2830), (CrimeType.ROBBERY,)),
    ),
    'Railway new Colony': (
        StreetLocation('Station Road', Point(17.7245, 83.2956), (CrimeType.KIDNAP,)),
        StreetLocation('Colony Main', Point(17.7230, 83.2940), (CrimeType.THEFT,)),
    ),
    'RK Beach': (
        StreetLocation('Beach Promenade', Point(17.7180, 83.3250), (CrimeType.ROBBERY, CrimeType.KIDNAP)),
        StreetLocation('Submarine Museum', Point(17.7160, 83.3230), (CrimeType.MURDER,)),
        StreetLocation('Aquarium Area', Point(17.7200, 83.3270), (CrimeType.ACCIDENT,)),
    ),
    'RTC Complex': (
        StreetLocation('Bus Stand', Point(17.7200, 83.3100), (CrimeType.MURDER,)),
        StreetLocation('Taxi Stand', Point(17.7180, 83.3080), (CrimeType.ROBBERY,)),
    ),
    'Rushikonda': (
        StreetLocation('Rushikonda Beach Road', Point(17.7920, 83.3850), (CrimeType.ACCIDENT,)),
        StreetLocation('Beach Area', Point(17.7880, 83.3820), (CrimeType.ROBBERY, CrimeType.KIDNAP)),
        StreetLocation('TDP Circle', Point(17.7950, 83.3880), (CrimeType.ASSAULT,)),
    ),
    'Scindia': (
        StreetLocation('Scindia Colony', Point(17.7150, 83.2900), (CrimeType.MURDER,)),
        StreetLocation('Main Road', Point(17.7130, 83.2880), (CrimeType.ACCIDENT,)),
    ),
    'Seethammadhara': (
        StreetLocation('Main Road', Point(17.7425, 83.3124), (CrimeType.ACCIDENT, CrimeType.MURDER)),
        StreetLocation('Extension', Point(17.7445, 83.3150), (CrimeType.KIDNAP,)),
    ),
    'Sheela Nagar': (
        StreetLocation('NH16 Signal', Point(17.7190, 83.2020), (CrimeType.ROBBERY, CrimeType.ACCIDENT)),
        StreetLocation('Industrial Area', Point(17.7210, 83.2040), (CrimeType.MURDER,)),
    ),
    'Simhachalam': (
        StreetLocation('Simhachalam Ghat Road', Point(17.7500, 83.2200), (CrimeType.ACCIDENT,)),
        StreetLocation('Temple Road', Point(17.7530, 83.2230), (CrimeType.MURDER, CrimeType.ROBBERY)),
        StreetLocation('Simhapuri Colony', Point(17.7470, 83.2180), (CrimeType.ASSAULT, CrimeType.KIDNAP)),
    ),
    'Siripuram': (
        StreetLocation('Dutt Island', Point(17.7198, 83.3163), (CrimeType.MURDER,)),
        StreetLocation('VIP Road', Point(17.7215, 83.3180), (CrimeType.ASSAULT,)),
    ),
    'Steel Plant Township': (
        StreetLocation('Ukkunagaram Road', Point(17.6100, 83.1900), (CrimeType.ASSAULT, CrimeType.ROBBERY)),
        StreetLocation('Sector 1', Point(17.6120, 83.1920), (CrimeType.MURDER,)),
        StreetLocation('Main Gate', Point(17.6080, 83.1880), (CrimeType.ACCIDENT,)),
    ),
    'Tagarapuvalasa': (
        StreetLocation('Gostani Bridge', Point(17.9301, 83.4257), (CrimeType.ACCIDENT,)),
        StreetLocation('Beach Road', Point(17.9280, 83.4230), (CrimeType.MURDER,)),
    ),
    'Venkojipalem': (
        StreetLocation('Main Road', Point(17.7100, 83.2920), (CrimeType.MURDER,)),
        StreetLocation('Temple Street', Point(17.7080, 83.2900), (CrimeType.ASSAULT,)),
    ),
    'Vishalakshinagar': (
        StreetLocation('Main Colony', Point(17.7350, 83.3200), (CrimeType.MURDER, CrimeType.ASSAULT)),
        StreetLocation('Layout Road', Point(17.7330, 83.3180), (CrimeType.ACCIDENT,)),
    ),
    'Vizianagaram': (
        StreetLocation('Fort Area', Point(18.1067, 83.3956), (CrimeType.MURDER, CrimeType.ASSAULT)),
        StreetLocation('Bus Station', Point(18.1100, 83.3920), (CrimeType.ROBBERY,)),
        StreetLocation('Railway Station', Point(18.1040, 83.3990), (CrimeType.KIDNAP,)),
        StreetLocation('Main Bazaar', Point(18.1080, 83.3940), (CrimeType.ACCIDENT,)),
    ),
    'Yendada': (
        StreetLocation('NH5 Road', Point(17.7700, 83.3600), (CrimeType.ACCIDENT,)),
        StreetLocation('IT Park Road', Point(17.7720, 83.3620), (CrimeType.MURDER,)),
        StreetLocation('Layout Area', Point(17.7680, 83.3580), (CrimeType.ROBBERY,)),
    ),
})
