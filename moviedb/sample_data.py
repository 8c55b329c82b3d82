"""
Built-in example records used in static mode.
"""

SAMPLE_MOVIES = [
    {
        "id": 1997,
        "title": "Two Brothers",
        "overview": (
            "Two tigers are separated as cubs and taken into captivity, only to be "
            "reunited years later as enemies by an explorer (Pearce) who inadvertently "
            "forces them to fight each other."
        ),
        "release_date": "2004-04-07",
        "runtime": 109,
        "genres": ["Adventure", "Drama", "Family"],
        "spoken_languages": ["English", "French", "Thai"],
        "poster_url": "https://image.tmdb.org/t/p/w500/5I2pRuJI3SZVsxP5iaorGaczzkI.jpg",
        "backdrop_url": "https://image.tmdb.org/t/p/w780/aB5123I8MNi3NIg0t9RrP6A7Yla.jpg",
        "cast_ids": [529, 13687, 1281, 20527, 20530],
        "crew_ids": [2358, 17063, 2352, 2359, 469],
        "production_company_ids": [866, 116231, 356],
        "trailer_url": "https://www.youtube.com/watch?v=xvRZIAwkTvQ",
        "imdb_rating": 7.103,
        "vote_count": 836,
        "seo_title": "Two Brothers: Cast, Crew, Production, Box-Office - TimesEntertain",
        "seo_description": (
            "Two Brothers: Two tigers are separated as cubs and taken into captivity, "
            "only to be reunited years later as enemies by an explorer (Pearce) who "
            "inadvertently forces them to fight each other."
        ),
        "seo_focus_keywords": (
            "Two Brothers,Adventure,Drama,Family,Two Brothers in English,"
            "Two Brothers in French,Two Brothers in Thai"
        ),
    },
    {
        "id": 1998,
        "title": "Sample Movie 2",
        "overview": "Another sample movie for demonstration.",
        "release_date": "2005-05-15",
        "runtime": 120,
        "genres": ["Action", "Thriller"],
        "spoken_languages": ["English"],
        "poster_url": "https://via.placeholder.com/500x750/1FB8CD/FFFFFF?text=Movie+2",
        "backdrop_url": "https://via.placeholder.com/780x439/5D878F/FFFFFF?text=Movie+2+Backdrop",
        "cast_ids": [110756],
        "crew_ids": [110756],
        "production_company_ids": [3448],
        "trailer_url": "https://www.youtube.com/watch?v=sample",
        "imdb_rating": 6.5,
        "vote_count": 425,
        "seo_title": "Sample Movie 2: Action Thriller",
        "seo_description": "An action-packed thriller for demonstration purposes.",
        "seo_focus_keywords": "Sample,Action,Thriller,Movie",
    },
]

SAMPLE_PERSONS = [
    {
        "id": 110756,
        "name": "Juuso Hirvikangas",
        "profile_url": "https://image.tmdb.org/t/p/w300/7rvAPTsfz9U2E5tYghfY8YQlZ94.jpg",
        "roles": [
            {"movie_id": 2, "character": "Man in Harbour (uncredited)"},
        ],
        "crew_roles": [
            {"movie_id": 2, "job": "Gaffer", "department": "Lighting"},
            {"movie_id": 3, "job": "Sound Assistant", "department": "Sound"},
        ],
    },
    {
        "id": 110757,
        "name": "Sample Actor",
        "profile_url": "https://via.placeholder.com/300x450/FFC185/000000?text=Sample+Actor",
        "roles": [
            {"movie_id": 1997, "character": "Leading Role"},
        ],
        "crew_roles": [],
    },
]

SAMPLE_PRODUCERS = [
    {
        "id": 3448,
        "name": "ITV",
        "origin_country": "GB",
        "logo_url": "https://image.tmdb.org/t/p/w300/dcA8JDfnnQPMaq8lv2CCiYrNe0S.png",
    },
    {
        "id": 3449,
        "name": "Sample Productions",
        "origin_country": "US",
        "logo_url": "https://via.placeholder.com/300x200/B4413C/FFFFFF?text=Sample+Productions",
    },
]

SAMPLE_DATA = {
    "movies": SAMPLE_MOVIES,
    "persons": SAMPLE_PERSONS,
    "producers": SAMPLE_PRODUCERS,
}
