# games/shinobi/content/characters.py
CHARACTERS = {
    "naruto": {
        "name": "Naruto Uzumaki",
        "hp": 120,
        "chakra": 100,
        "image": "https://picsum.photos/seed/naruto/200/200",
        "skills": ["n_1", "n_2", "n_3", "n_4", "n_5", "n_6", "n_7"],
        "display": {"color": "orange", "accent": "yellow"},
    },
    "sasuke": {
        "name": "Sasuke Uchiha",
        "hp": 100,
        "chakra": 120,
        "image": "https://picsum.photos/seed/sasuke/200/200",
        "skills": ["s_1", "s_2", "s_3", "s_4", "s_5", "s_6", "s_7"],
        "display": {"color": "indigo", "accent": "purple"},
    },
    "kakashi": {
        "name": "Kakashi Hatake",
        "hp": 110,
        "chakra": 110,
        "image": "https://picsum.photos/seed/kakashi/200/200",
        "skills": ["k_1", "k_2", "k_3", "k_4", "k_5", "k_6", "k_7"],
        "display": {"color": "zinc", "accent": "green"},
    },
}
