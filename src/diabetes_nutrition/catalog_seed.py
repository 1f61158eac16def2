"""Seed data for the bilingual food catalog (values per 100 g)."""
# ruff: noqa: E501

from diabetes_nutrition.domain.catalog import FoodRecord

_COLUMNS = (
    "alternate_name",
    "name",
    "calories",
    "carbs_g",
    "protein_g",
    "fat_g",
    "sugar_g",
    "glycemic_index",
    "suitability",
    "category",
)

_ROWS: tuple[tuple[object, ...], ...] = (
    ("Basmati Rice", "أرز بسمتي", 150, 32, 3, 0, 0, 58, "moderate", "grains"),
    ("Brown Bread", "خبز أسمر", 80, 15, 4, 1, 2, 51, "moderate", "grains"),
    ("Grilled Chicken Breast", "صدر دجاج مشوي", 165, 0, 31, 3, 0, 0, "safe", "proteins"),
    ("Mixed Vegetables", "خضروات مشكلة", 65, 13, 2, 0, 4, 15, "safe", "vegetables"),
    ("White Rice", "أرز أبيض", 130, 28, 2.7, 0.3, 0.1, 73, "avoid", "grains"),
    ("Brown Rice", "أرز بني", 112, 24, 2.6, 0.9, 0.4, 68, "moderate", "grains"),
    ("Quinoa", "كينوا", 120, 21, 4.4, 1.9, 0.9, 53, "safe", "grains"),
    ("Whole Wheat Bread", "خبز القمح الكامل", 81, 15, 4, 1.1, 1.5, 51, "moderate", "grains"),
    ("White Bread", "خبز أبيض", 77, 14.3, 2.6, 1, 1.4, 75, "avoid", "grains"),
    ("Pita Bread", "خبز عربي", 165, 33.4, 5.5, 0.8, 0.4, 57, "moderate", "grains"),
    ("Oatmeal", "شوفان", 68, 12, 2.5, 1.4, 0.5, 55, "safe", "grains"),
    ("Bulgur Wheat", "برغل", 151, 33.8, 5.6, 0.4, 0.1, 48, "safe", "grains"),
    ("Couscous", "كسكس", 112, 23.2, 3.8, 0.2, 0.3, 65, "moderate", "grains"),
    ("Freekeh", "فريكة", 114, 18.8, 5.1, 0.9, 0.5, 43, "safe", "grains"),
    ("Chicken Breast", "صدر دجاج", 165, 0, 31, 3.6, 0, 0, "safe", "proteins"),
    ("Beef", "لحم بقري", 250, 0, 26, 17, 0, 0, "safe", "proteins"),
    ("Lamb", "لحم ضأن", 294, 0, 25, 21, 0, 0, "moderate", "proteins"),
    ("Fish (Salmon)", "سمك السلمون", 208, 0, 20, 13, 0, 0, "safe", "proteins"),
    ("Tuna", "تونة", 132, 0, 28, 1.3, 0, 0, "safe", "proteins"),
    ("Eggs", "بيض", 78, 0.6, 6.3, 5.3, 0.6, 0, "safe", "proteins"),
    ("Tofu", "توفو", 76, 1.9, 8, 4.2, 0.5, 15, "safe", "proteins"),
    ("Lentils", "عدس", 116, 20, 9, 0.4, 1.8, 32, "safe", "proteins"),
    ("Chickpeas", "حمص", 164, 27, 8.9, 2.6, 4.8, 28, "safe", "proteins"),
    ("Fava Beans", "فول", 110, 19.7, 7.6, 0.4, 2.1, 40, "safe", "proteins"),
    ("Spinach", "سبانخ", 23, 3.6, 2.9, 0.4, 0.4, 15, "safe", "vegetables"),
    ("Broccoli", "بروكلي", 34, 6.6, 2.8, 0.4, 1.7, 15, "safe", "vegetables"),
    ("Carrots", "جزر", 41, 9.6, 0.9, 0.2, 4.7, 35, "safe", "vegetables"),
    ("Tomatoes", "طماطم", 18, 3.9, 0.9, 0.2, 2.6, 15, "safe", "vegetables"),
    ("Cucumber", "خيار", 15, 3.6, 0.7, 0.1, 1.7, 15, "safe", "vegetables"),
    ("Bell Peppers", "فلفل رومي", 31, 6, 1, 0.3, 4.2, 15, "safe", "vegetables"),
    ("Zucchini", "كوسة", 17, 3.1, 1.2, 0.3, 2.5, 15, "safe", "vegetables"),
    ("Eggplant", "باذنجان", 25, 6, 1, 0.2, 3.2, 15, "safe", "vegetables"),
    ("Okra", "بامية", 33, 7, 2, 0.1, 1.5, 20, "safe", "vegetables"),
    ("Cabbage", "ملفوف", 25, 5.8, 1.3, 0.1, 3.2, 15, "safe", "vegetables"),
    ("Apple", "تفاح", 52, 13.8, 0.3, 0.2, 10.4, 38, "moderate", "fruits"),
    ("Orange", "برتقال", 47, 11.8, 0.9, 0.1, 9.4, 40, "moderate", "fruits"),
    ("Banana", "موز", 89, 22.8, 1.1, 0.3, 12.2, 51, "moderate", "fruits"),
    ("Grapes", "عنب", 69, 18, 0.7, 0.2, 15.5, 59, "avoid", "fruits"),
    ("Strawberries", "فراولة", 32, 7.7, 0.7, 0.3, 4.9, 40, "safe", "fruits"),
    ("Watermelon", "بطيخ", 30, 7.6, 0.6, 0.2, 6.2, 72, "avoid", "fruits"),
    ("Dates", "تمر", 282, 75, 2.5, 0.4, 63, 55, "avoid", "fruits"),
    ("Pomegranate", "رمان", 83, 18.7, 1.7, 1.2, 13.7, 35, "moderate", "fruits"),
    ("Figs", "تين", 74, 19.2, 0.8, 0.3, 16.3, 61, "avoid", "fruits"),
    ("Avocado", "أفوكادو", 160, 8.5, 2, 14.7, 0.7, 15, "safe", "fruits"),
    ("Whole Milk", "حليب كامل الدسم", 61, 4.8, 3.2, 3.3, 5.1, 31, "moderate", "dairy"),
    ("Low-Fat Milk", "حليب قليل الدسم", 42, 5, 3.4, 1, 5.1, 32, "moderate", "dairy"),
    ("Yogurt (Plain)", "زبادي سادة", 59, 3.6, 10, 0.4, 3.2, 36, "safe", "dairy"),
    ("Cheese (White)", "جبنة بيضاء", 264, 4.1, 18.9, 18.8, 0.5, 0, "moderate", "dairy"),
    ("Labneh", "لبنة", 101, 3.8, 7, 6.8, 3.8, 15, "safe", "dairy"),
    ("Hummus", "حمص بطحينة", 166, 14.3, 7.9, 9.6, 0.4, 25, "safe", "middle-eastern"),
    ("Tabbouleh", "تبولة", 120, 16, 3, 6, 1.2, 45, "safe", "middle-eastern"),
    ("Fattoush", "فتوش", 110, 12, 2, 7, 2.5, 40, "safe", "middle-eastern"),
    ("Mujadara", "مجدرة", 145, 24, 6, 3, 1.5, 35, "moderate", "middle-eastern"),
    ("Shawarma (Chicken)", "شاورما دجاج", 400, 25, 32, 20, 2.5, 45, "moderate", "middle-eastern"),
    ("Kibbeh", "كبة", 290, 25, 15, 14, 1.2, 50, "moderate", "middle-eastern"),
    ("Mansaf", "منسف", 680, 42, 43, 37, 4.5, 60, "avoid", "middle-eastern"),
    ("Maqluba", "مقلوبة", 420, 45, 18, 20, 3.5, 65, "moderate", "middle-eastern"),
    ("Kousa Mahshi", "كوسا محشي", 230, 20, 12, 11, 3.8, 40, "moderate", "middle-eastern"),
    ("Warak Enab", "ورق عنب", 220, 32, 5, 9, 3.2, 45, "moderate", "middle-eastern"),
    ("Almonds", "لوز", 579, 21.7, 21.2, 49.9, 3.9, 15, "safe", "nuts-seeds"),
    ("Walnuts", "جوز", 654, 13.7, 15.2, 65.2, 2.6, 15, "safe", "nuts-seeds"),
    ("Pistachios", "فستق حلبي", 560, 27.5, 20.6, 45.4, 7.7, 15, "safe", "nuts-seeds"),
    ("Sunflower Seeds", "بذور عباد الشمس", 585, 20, 20.8, 51.5, 2.6, 15, "safe", "nuts-seeds"),
    ("Chia Seeds", "بذور الشيا", 486, 42.1, 16.5, 30.7, 0, 1, "safe", "nuts-seeds"),
    ("Baklava", "بقلاوة", 334, 43, 6, 16, 26, 65, "avoid", "desserts"),
    ("Kunafa", "كنافة", 457, 64, 8, 20, 37, 75, "avoid", "desserts"),
    ("Halawa", "حلاوة طحينية", 469, 56, 12, 25, 38, 55, "avoid", "desserts"),
    ("Mamoul", "معمول", 423, 68, 6, 16, 29, 60, "avoid", "desserts"),
    ("Basbousa", "بسبوسة", 367, 62, 4, 12, 33, 70, "avoid", "desserts"),
    ("Arabic Coffee", "قهوة عربية", 5, 1, 0.3, 0.1, 0, 0, "safe", "beverages"),
    ("Mint Tea", "شاي بالنعناع", 10, 2, 0.1, 0, 0, 0, "safe", "beverages"),
    ("Orange Juice", "عصير برتقال", 45, 10.4, 0.7, 0.2, 8.3, 50, "avoid", "beverages"),
    ("Pomegranate Juice", "عصير رمان", 66, 16.3, 0.2, 0.1, 12.6, 53, "moderate", "beverages"),
    ("Lemonade", "ليموناضة", 31, 8, 0.1, 0.1, 7.1, 25, "moderate", "beverages"),
)


def seed_foods() -> list[FoodRecord]:
    """Build catalog records with stable sequential ids."""
    foods: list[FoodRecord] = []
    for index, row in enumerate(_ROWS, start=1):
        values = dict(zip(_COLUMNS, row, strict=True))
        foods.append(
            FoodRecord(
                id=index,
                name=str(values["name"]),
                alternate_name=str(values["alternate_name"]),
                calories=float(values["calories"]),
                carbs_g=float(values["carbs_g"]),
                protein_g=float(values["protein_g"]),
                fat_g=float(values["fat_g"]),
                sugar_g=float(values["sugar_g"]),
                glycemic_index=int(values["glycemic_index"]),
                suitability=str(values["suitability"]),
                category=str(values["category"]),
            )
        )
    return foods
