# This project was developed with assistance from AI tools.
"""
Bundled property listings for Harihara Constructions, Bengaluru.

Stored in the same document shape the hosted document store returns
(camelCase keys, ``$id``) so the seed catalogue goes through the same
normalization as live data.

Simulated for demonstration purposes -- not real listings.
"""

_DETAILS_BASE = "https://hariharaconstructions.com/projects"

PROPERTY_DOCUMENTS: list[dict] = [
    {
        "$id": "hhc-sunrise-1",
        "name": "Harihara Sunrise Residences",
        "location": "Whitefield, Bengaluru",
        "configuration": "2 BHK",
        "price": 6_800_000,
        "carpetArea": "980 sq.ft",
        "possession": "Ready to move",
        "highlights": ["5 mins to Metro", "Clubhouse access", "75% open spaces"],
        "detailsUrl": f"{_DETAILS_BASE}/sunrise",
        "latitude": 12.9698,
        "longitude": 77.7499,
        "tags": ["Premium Residences", "Metro-Linked", "High Yield"],
    },
    {
        "$id": "hhc-lakeside-1",
        "name": "Lakeside Grove Villas",
        "location": "Hebbal, Bengaluru",
        "configuration": "3 BHK",
        "price": 9_400_000,
        "carpetArea": "1420 sq.ft",
        "possession": "Dec 2026",
        "highlights": ["Lake view", "Rooftop deck", "EV charging bays"],
        "detailsUrl": f"{_DETAILS_BASE}/lakeside",
        "latitude": 13.0424,
        "longitude": 77.5891,
        "tags": ["Lakefront", "Luxury Villas", "EV Ready"],
    },
    {
        "$id": "hhc-urban-1",
        "name": "Urban Crest Residences",
        "location": "Electronic City, Bengaluru",
        "configuration": "1.5 BHK",
        "price": 4_800_000,
        "carpetArea": "720 sq.ft",
        "possession": "Jun 2025",
        "highlights": ["Smart home automation", "Co-working pods", "Rooftop infinity pool"],
        "detailsUrl": f"{_DETAILS_BASE}/urban-crest",
        "latitude": 12.8426,
        "longitude": 77.6633,
        "tags": ["Smart Living", "Young Workforce"],
    },
    {
        "$id": "hhc-hilltop-1",
        "name": "Hilltop Terraces",
        "location": "Kanakapura Road, Bengaluru",
        "configuration": "3 BHK Duplex",
        "price": 12_200_000,
        "carpetArea": "1780 sq.ft",
        "possession": "Mar 2027",
        "highlights": ["Sunken living room", "Sky deck", "Triple height clubhouse"],
        "detailsUrl": f"{_DETAILS_BASE}/hilltop",
        "latitude": 12.8145,
        "longitude": 77.5779,
        "tags": ["Sky Deck", "Ready 2027"],
    },
    {
        "$id": "hhc-cascade-1",
        "name": "Cascade Enclave",
        "location": "Sarjapur Road, Bengaluru",
        "configuration": "2.5 BHK",
        "price": 7_600_000,
        "carpetArea": "1115 sq.ft",
        "possession": "Oct 2025",
        "highlights": ["Biophilic landscaping", "Olympic lap pool", "Indoor golf simulator"],
        "detailsUrl": f"{_DETAILS_BASE}/cascade",
        "latitude": 12.9081,
        "longitude": 77.699,
        "tags": ["Biophilic", "Wellness"],
    },
    {
        "$id": "hhc-skyline-1",
        "name": "Skyline Edge",
        "location": "Yelahanka, Bengaluru",
        "configuration": "2 BHK",
        "price": 5_400_000,
        "carpetArea": "960 sq.ft",
        "possession": "Aug 2025",
        "highlights": ["Sky lounge", "Hybrid work pods", "24/7 concierge"],
        "detailsUrl": f"{_DETAILS_BASE}/skyline",
        "latitude": 13.1,
        "longitude": 77.596,
        "tags": ["Concierge", "Hybrid Work"],
    },
    {
        "$id": "hhc-botanical-1",
        "name": "Botanical Courts",
        "location": "Devanahalli, Bengaluru",
        "configuration": "Villa Plot",
        "price": 3_500_000,
        "carpetArea": "1500 sq.ft",
        "possession": "Ready for registration",
        "highlights": ["Managed community", "Tree-lined avenues", "Outdoor amphitheatre"],
        "detailsUrl": f"{_DETAILS_BASE}/botanical",
        "latitude": 13.223,
        "longitude": 77.706,
        "tags": ["Villa Plot", "Managed"],
    },
    {
        "$id": "hhc-boulevard-1",
        "name": "Boulevard Heights",
        "location": "Bannerghatta Road, Bengaluru",
        "configuration": "3 BHK",
        "price": 11_500_000,
        "carpetArea": "1650 sq.ft",
        "possession": "Sep 2026",
        "highlights": ["Central boulevard", "Wellness spa", "Multiplex lounge"],
        "detailsUrl": f"{_DETAILS_BASE}/boulevard",
        "latitude": 12.878,
        "longitude": 77.599,
        "tags": ["Mixed Use", "Wellness"],
    },
]
