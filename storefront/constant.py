"""Editable static catalog, category and slide configuration."""

from __future__ import annotations

# Canonical product records consumed by storefront.data (which wraps these into Product dataclass instances).
PRODUCT_RECORDS: list[dict[str, object]] = [
    {"id": "laab-kai-chicken-salad", "name": "Laab kai chicken salad", "price": "10", "image": "laab_kai_chicken_salad.png", "category": "salads", "spiciness": 2, "nuts": True},
    {"id": "som-tam-papaya-salad", "name": "Som tam papaya salad", "price": "9.5", "image": "som_tam_papaya_salad.png", "category": "salads", "spiciness": 0, "nuts": True, "vegeterian": True},
    {"id": "tom-yam-kai", "name": "Tom yam kai", "price": "7", "image": "tom_yam_kai.png", "category": "soups", "spiciness": 3},
    {"id": "tom-kha-kai", "name": "Tom kha kai", "price": "7", "image": "tom_kha_kai.png", "category": "soups", "spiciness": 2},
    {"id": "tom-yam-vegetarian", "name": "Tom yam vegetarian", "price": "7", "image": "tom_yam_vegetarian.png", "category": "soups", "spiciness": 3, "vegeterian": True},
    {"id": "tom-kha-vegetarian", "name": "Tom kha vegetarian", "price": "7", "image": "tom_kha_vegetarian.png", "category": "soups", "spiciness": 2, "vegeterian": True},
    {"id": "chicken-cashew", "name": "Chicken cashew", "price": "14", "image": "chicken_cashew.png", "category": "chicken-dishes", "spiciness": 0, "nuts": True},
    {"id": "red-curry-chicken", "name": "Red curry chicken", "price": "14", "image": "red_curry_chicken.png", "category": "chicken-dishes", "spiciness": 3},
    {"id": "beef-massaman", "name": "Beef massaman", "price": "14.5", "image": "beef_massaman.png", "category": "beef-dishes", "spiciness": 1, "nuts": True},
    {"id": "seafood-pad-thai", "name": "Seafood pad thai", "price": "15", "image": "seafood_pad_thai.png", "category": "seafood-dishes", "spiciness": 1, "nuts": True},
    {"id": "green-curry-veggies", "name": "Green curry veggies", "price": "12", "image": "green_curry_veggies.png", "category": "vegetable-dishes", "spiciness": 4, "vegeterian": True},
    {"id": "shrimp-springrolls", "name": "Shrimp springrolls", "price": "6.5", "image": "shrimp_springrolls.png", "category": "bits-and-bites", "spiciness": 0},
    {"id": "sweet-corn-cakes", "name": "Sweet corn cakes", "price": "6", "image": "sweet_corn_cakes.png", "category": "bits-and-bites", "spiciness": 0, "vegeterian": True},
    {"id": "jasmine-rice", "name": "Jasmine rice", "price": "2.5", "image": "jasmine_rice.png", "category": "on-the-side", "vegeterian": True},
    {"id": "penang-shrimp", "name": "Penang shrimp", "price": "16", "image": "penang_shrimp.png", "category": "seafood-dishes", "spiciness": 2},
    {"id": "red-curry-veggies", "name": "Red curry veggies", "price": "12.5", "image": "red_curry_veggies.png", "category": "vegetable-dishes", "spiciness": 3, "vegeterian": True},
    {"id": "chicken-springrolls", "name": "Chicken springrolls", "price": "6.5", "image": "chicken_springrolls.png", "category": "bits-and-bites", "spiciness": 0},
]

CATEGORY_RECORDS: list[dict[str, str]] = [
    {"id": "", "name": "All"},
    {"id": "salads", "name": "Salads"},
    {"id": "soups", "name": "Soups"},
    {"id": "chicken-dishes", "name": "Chicken dishes"},
    {"id": "beef-dishes", "name": "Beef dishes"},
    {"id": "seafood-dishes", "name": "Seafood dishes"},
    {"id": "vegetable-dishes", "name": "Vegetable dishes"},
    {"id": "bits-and-bites", "name": "Bits and bites"},
    {"id": "on-the-side", "name": "On the side"},
]

SLIDE_RECORDS: list[dict[str, object]] = [
    {"id": "penang-shrimp", "name": "Penang shrimp", "price": "16", "image": "penang_shrimp.png"},
    {"id": "chicken-cashew", "name": "Chicken cashew", "price": "14", "image": "chicken_cashew.png"},
    {"id": "red-curry-veggies", "name": "Red curry veggies", "price": "12.5", "image": "red_curry_veggies.png"},
    {"id": "chicken-springrolls", "name": "Chicken springrolls", "price": "6.5", "image": "chicken_springrolls.png"},
]

SPICINESS_LABELS: dict[int, str] = {
    0: "No spice",
    1: "A little",
    2: "Medium",
    3: "Hot",
    4: "Very hot",
}

CHECKOUT_FORM_DEFAULTS: dict[str, str] = {
    "name": "Santa Claus",
    "email": "john@gmail.com",
    "tel": "+1234567",
    "address": "North, Lapland, Snow Home",
}
