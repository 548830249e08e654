"""
Reponses TMDB simulees pour les tests.

Contient des reponses realistes de l'API TMDB v3 (recherche, details avec
credits, images, configuration), utilisees avec respx pour simuler httpx.
"""

# GET /search/movie?query=matrix&page=1&language=pt-BR
TMDB_SEARCH_MATRIX_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/ncEsesgOJDNrTUED89hYbA117wo.jpg",
            "genre_ids": [28, 878],
            "id": 603,
            "original_language": "en",
            "original_title": "The Matrix",
            "overview": "Um hacker aprende com misteriosos rebeldes sobre a verdadeira natureza de sua realidade.",
            "popularity": 98.4,
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "release_date": "1999-03-30",
            "title": "Matrix",
            "video": False,
            "vote_average": 8.2,
            "vote_count": 25000,
        },
        {
            "adult": False,
            "backdrop_path": None,
            "genre_ids": [28, 878],
            "id": 604,
            "original_language": "en",
            "original_title": "The Matrix Reloaded",
            "overview": "",
            "popularity": 45.1,
            "poster_path": None,
            "release_date": "",
            "title": "Matrix Reloaded",
            "video": False,
            "vote_average": 7.1,
            "vote_count": 11000,
        },
    ],
    "total_pages": 5,
    "total_results": 93,
}

TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /movie/603?language=pt-BR&append_to_response=credits
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/ncEsesgOJDNrTUED89hYbA117wo.jpg",
    "budget": 63000000,
    "genres": [
        {"id": 28, "name": "Acao"},
        {"id": 878, "name": "Ficcao cientifica"},
    ],
    "id": 603,
    "imdb_id": "tt0133093",
    "original_language": "en",
    "original_title": "The Matrix",
    "overview": "Um hacker aprende com misteriosos rebeldes sobre a verdadeira natureza de sua realidade.",
    "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
    "release_date": "1999-03-30",
    "runtime": 136,
    "status": "Released",
    "title": "Matrix",
    "vote_average": 8.2,
    "vote_count": 25000,
    "credits": {
        "cast": [
            {"id": 6384, "name": "Keanu Reeves", "character": "Neo", "order": 0},
            {"id": 2975, "name": "Laurence Fishburne", "character": "Morpheus", "order": 1},
            {"id": 530, "name": "Carrie-Anne Moss", "character": "Trinity", "order": 2},
            {"id": 1331, "name": "Hugo Weaving", "character": "Agent Smith", "order": 3},
            {"id": 9364, "name": "Gloria Foster", "character": "Oracle", "order": 4},
            {"id": 7244, "name": "Joe Pantoliano", "character": "Cypher", "order": 5},
            {"id": 9372, "name": "Marcus Chong", "character": "Tank", "order": 6},
        ],
        "crew": [
            {"id": 9339, "name": "Lilly Wachowski", "job": "Director"},
            {"id": 9340, "name": "Lana Wachowski", "job": "Director"},
        ],
    },
}

# GET /movie/603/images
TMDB_MOVIE_IMAGES_RESPONSE = {
    "id": 603,
    "backdrops": [
        {
            "aspect_ratio": 1.778,
            "height": 1080,
            "iso_639_1": None,
            "file_path": "/ncEsesgOJDNrTUED89hYbA117wo.jpg",
            "vote_average": 5.5,
            "vote_count": 12,
            "width": 1920,
        },
    ],
    "posters": [
        {
            "aspect_ratio": 0.667,
            "height": 3000,
            "iso_639_1": "pt",
            "file_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "vote_average": 5.3,
            "vote_count": 8,
            "width": 2000,
        },
        {
            "aspect_ratio": 0.667,
            "height": 1500,
            "iso_639_1": "en",
            "file_path": "/aOIuZAjPaRIE6CMzbazvcHuHXDc.jpg",
            "vote_average": None,
            "vote_count": 0,
            "width": 1000,
        },
    ],
}

# GET /configuration
TMDB_CONFIGURATION_RESPONSE = {
    "images": {
        "base_url": "http://image.tmdb.org/t/p/",
        "secure_base_url": "https://image.tmdb.org/t/p/",
        "backdrop_sizes": ["w300", "w780", "w1280", "original"],
        "logo_sizes": ["w45", "w92", "w154", "w185", "w300", "w500", "original"],
        "poster_sizes": ["w92", "w154", "w185", "w342", "w500", "w780", "original"],
        "profile_sizes": ["w45", "w185", "h632", "original"],
        "still_sizes": ["w92", "w185", "w300", "original"],
    },
    "change_keys": ["adult", "title"],
}

TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}
