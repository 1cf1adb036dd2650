"""Canned Google Maps response bodies."""

GEOCODE_NEW_YORK = {
    "results": [
        {
            "formatted_address": "New York, NY, USA",
            "geometry": {
                "location": {"lat": 40.7127837, "lng": -74.0059413},
                "location_type": "APPROXIMATE",
                "viewport": {
                    "northeast": {"lat": 40.9175771, "lng": -73.70027209999999},
                    "southwest": {"lat": 40.4773991, "lng": -74.25908989999999},
                },
            },
            "place_id": "ChIJOwg_06VPwokRYv534QaPC8g",
            "types": ["locality", "political"],
        },
        {
            "formatted_address": "New York, USA",
            "geometry": {"location": {"lat": 43.2994285, "lng": -74.21793260000001}},
            "types": ["administrative_area_level_1", "political"],
        },
    ],
    "status": "OK",
}

REVERSE_CITY_HALL = {
    "results": [
        {
            "address_components": [
                {"long_name": "Lower Manhattan", "short_name": "Lower Manhattan", "types": ["neighborhood", "political"]},
                {"long_name": "Manhattan", "short_name": "Manhattan", "types": ["political", "sublocality", "sublocality_level_1"]},
                {"long_name": "New York", "short_name": "New York", "types": ["locality", "political"]},
                {"long_name": "New York County", "short_name": "New York County", "types": ["administrative_area_level_2", "political"]},
                {"long_name": "New York", "short_name": "NY", "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
                {"long_name": "10007", "short_name": "10007", "types": ["postal_code"]},
            ],
            "formatted_address": "New York City Hall, New York, NY 10007, USA",
            "geometry": {"location": {"lat": 40.7127744, "lng": -74.006059}, "location_type": "APPROXIMATE"},
            "types": ["establishment", "point_of_interest", "premise"],
        },
        {
            "address_components": [],
            "formatted_address": "Manhattan, New York, NY, USA",
            "types": ["political", "sublocality"],
        },
    ],
    "status": "OK",
}

ZERO_RESULTS = {"results": [], "status": "ZERO_RESULTS"}
