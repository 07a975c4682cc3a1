"""Built-in food catalog shipped with a fresh store."""

from nutrition_ledger.domain.catalog import FoodItem

# name, serving, grams, kcal, protein, carbs, fat, fiber, sugar, sodium (mg)
_ROWS: list[tuple[str, str, float, float, float, float, float, float, float, float]] = [
    ("Chicken Breast", "100g", 100, 165, 31, 0, 3.6, 0, 0, 74),
    ("Salmon", "100g", 100, 208, 25, 0, 12, 0, 0, 44),
    ("Eggs", "1 large", 50, 70, 6, 0.6, 5, 0, 0.6, 70),
    ("Ground Beef (90% lean)", "100g", 100, 176, 20, 0, 10, 0, 0, 66),
    ("Greek Yogurt", "1 cup", 170, 100, 17, 6, 0, 0, 6, 50),
    ("Cottage Cheese", "1 cup", 226, 163, 28, 6, 2, 0, 6, 918),
    ("Brown Rice", "1 cup cooked", 195, 216, 5, 45, 1.8, 3.5, 0.7, 10),
    ("White Rice", "1 cup cooked", 158, 205, 4.3, 45, 0.4, 0.6, 0.1, 2),
    ("Quinoa", "1 cup cooked", 185, 222, 8, 40, 3.6, 5, 0.9, 13),
    ("Oatmeal", "1 cup cooked", 234, 154, 6, 27, 3, 4, 1, 7),
    ("Whole Wheat Bread", "1 slice", 28, 81, 4, 14, 1.1, 2, 1.4, 144),
    ("Sweet Potato", "1 medium", 114, 103, 2.3, 24, 0.2, 3.8, 7.4, 41),
    ("Banana", "1 medium", 118, 105, 1.3, 27, 0.4, 3.1, 14.4, 1),
    ("Apple", "1 medium", 182, 95, 0.5, 25, 0.3, 4.4, 19, 2),
    ("Orange", "1 medium", 131, 62, 1.2, 15.4, 0.2, 3.1, 12.2, 0),
    ("Blueberries", "1 cup", 148, 84, 1.1, 21, 0.5, 3.6, 15, 1),
    ("Strawberries", "1 cup", 152, 49, 1, 12, 0.5, 3, 7.4, 1),
    ("Broccoli", "1 cup", 91, 31, 2.6, 6, 0.3, 2.6, 1.5, 33),
    ("Spinach", "1 cup", 30, 7, 0.9, 1.1, 0.1, 0.7, 0.1, 24),
    ("Avocado", "1 medium", 150, 240, 3, 13, 22, 10, 1, 10),
    ("Carrots", "1 cup", 128, 52, 1.2, 12, 0.3, 3.6, 6.1, 88),
    ("Almonds", "1 oz (28g)", 28, 164, 6, 6, 14, 3.5, 1.2, 1),
    ("Peanut Butter", "2 tbsp", 32, 188, 8, 6, 16, 2, 3, 152),
    ("Chia Seeds", "1 oz (28g)", 28, 138, 4.7, 12, 8.7, 10.6, 0, 5),
    ("Protein Bar", "1 bar", 60, 200, 20, 22, 6, 1, 2, 200),
    ("Granola Bar", "1 bar", 28, 120, 2, 22, 3, 1, 8, 100),
    ("Coffee", "1 cup", 240, 2, 0.3, 0, 0, 0, 0, 5),
    ("Milk (2%)", "1 cup", 244, 122, 8, 12, 5, 0, 12, 95),
]


def seed_foods() -> tuple[FoodItem, ...]:
    """Return the built-in catalog with ids "1".."28"."""
    return tuple(
        FoodItem(
            id=str(index),
            name=name,
            serving_size=serving,
            serving_size_grams=grams,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
            is_custom=False,
            fiber=fiber,
            sugar=sugar,
            sodium=sodium,
        )
        for index, (
            name,
            serving,
            grams,
            calories,
            protein,
            carbs,
            fat,
            fiber,
            sugar,
            sodium,
        ) in enumerate(_ROWS, start=1)
    )
