# games/shinobi/content/events.py
RANDOM_EVENTS = [
    {
        "id": "event_ramen",
        "title": "Ichiraku Ramen",
        "description": "You pass Teuchi's ramen stand. The smell is irresistible.",
        "icon": "food",
        "options": [
            {"label": "Order a bowl of tonkotsu", "effect": "heal", "value": 40,
             "result": "Delicious! You recover 40 HP."},
            {"label": "Hurry past", "effect": "nothing", "value": 0,
             "result": "You ignore your hunger and keep moving."},
        ],
    },
    {
        "id": "event_trap",
        "title": "Forest Trap",
        "description": "Careful! You stepped on an explosive tag left by enemy ninja.",
        "icon": "trap",
        "options": [
            {"label": "Try to dodge", "effect": "damage", "value": 20,
             "result": "The blast catches you for 20 damage."},
        ],
    },
    {
        "id": "event_merchant",
        "title": "Travelling Merchant",
        "description": "A mysterious merchant in the wilds. He seems to be looking for a lost purse.",
        "icon": "npc",
        "options": [
            {"label": "Return the purse you found", "effect": "gold", "value": 50,
             "result": "The grateful merchant rewards you with 50 gold."},
            {"label": "Rob him", "effect": "damage", "value": 10,
             "result": "His bodyguards beat you up. You take 10 damage."},
        ],
    },
    {
        "id": "event_meditation",
        "title": "Natural Energy",
        "description": "A quiet waterfall, perfect for training.",
        "icon": "scroll",
        "options": [
            {"label": "Meditate", "effect": "chakra", "value": 100,
             "result": "Refreshed! You recover 100 chakra."},
        ],
    },
    {
        "id": "event_ambush",
        "title": "Ambush",
        "description": "A band of ronin leaps out of the brush!",
        "icon": "trap",
        "options": [
            {"label": "Break through", "effect": "damage", "value": 15,
             "result": "You take a few scratches but get away."},
        ],
    },
]
