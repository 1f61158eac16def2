"""Diabetes suitability rules for a meal."""

from collections.abc import Sequence

from diabetes_nutrition.domain.analysis import (
    FoodSuitability,
    NutritionTotals,
    SuitabilityVerdict,
)
from diabetes_nutrition.domain.catalog import AVOID, MODERATE, SAFE, FoodRecord
from diabetes_nutrition.domain.fallbacks import FallbackPolicy
from diabetes_nutrition.services.resolver import resolve_food_name

_SEVERITY = {SAFE: 0, MODERATE: 1, AVOID: 2}

# (moderate above, avoid above) per aggregate nutrient.
SUGAR_LIMITS = (10.0, 15.0)
CARB_LIMITS = (45.0, 60.0)
GLYCEMIC_LIMITS = (55.0, 70.0)

_CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("grains", ("أرز", "rice", "مكرونة", "pasta", "نودلز", "noodle")),
    ("grains", ("خبز", "bread", "toast", "معجنات", "pastry")),
    ("proteins", ("لحم", "meat", "دجاج", "chicken", "سمك", "fish")),
    ("vegetables", ("خضار", "خضروات", "vegetable", "سلطة", "salad")),
    ("fruits", ("فواكه", "fruit", "تفاح", "apple", "موز", "banana")),
    ("desserts", ("حلوى", "حلويات", "dessert", "كيك", "cake", "شوكولاتة")),
    ("desserts", ("chocolate",)),
)

_CATEGORY_REASONS: dict[str, dict[tuple[str, str], str]] = {
    "ar": {
        ("grains", SAFE): (
            "{name} بكميات صغيرة مع البروتين والألياف يمكن أن يكون مناسباً "
            "لمرضى السكري."
        ),
        ("grains", MODERATE): (
            "{name} متوسط المؤشر الجلايسيمي، تناوله باعتدال مع الخضار والبروتين "
            "لتقليل تأثيره على سكر الدم."
        ),
        ("grains", AVOID): (
            "يفضل تجنب {name} لأنه يرفع مستوى السكر بسرعة، استبدله بالحبوب "
            "الكاملة مثل الأرز البني أو الكينوا."
        ),
        ("proteins", SAFE): (
            "{name} مصدر جيد للبروتين ولا يؤثر مباشرة على مستوى السكر في الدم."
        ),
        ("proteins", MODERATE): (
            "تناول {name} باعتدال مع مراعاة كمية الدهون وطريقة الطهي."
        ),
        ("proteins", AVOID): (
            "يفضل تجنب {name} لارتفاع محتواه من الدهون وتأثيره السلبي على "
            "صحة القلب ومقاومة الأنسولين."
        ),
        ("vegetables", SAFE): (
            "{name} غني بالألياف ويساعد في إبطاء امتصاص السكر، مما يجعله خياراً "
            "مثالياً لمرضى السكري."
        ),
        ("vegetables", MODERATE): (
            "تناول {name} مع صلصات قليلة الدهون والسكر للحصول على أقصى فائدة."
        ),
        ("fruits", SAFE): (
            "{name} منخفض المؤشر الجلايسيمي ومناسب لمرضى السكري بكميات معتدلة."
        ),
        ("fruits", MODERATE): (
            "تناول {name} باعتدال (حصة واحدة) مع مراعاة محتواه من السكر الطبيعي."
        ),
        ("fruits", AVOID): (
            "يفضل تحديد كميات {name} لارتفاع محتواه من السكر."
        ),
        ("desserts", MODERATE): (
            "يمكن تناول كميات صغيرة جداً من {name} مع وجبة متوازنة على فترات "
            "متباعدة."
        ),
        ("desserts", AVOID): (
            "يفضل تجنب {name} لاحتوائه على نسب عالية من السكر الذي يرفع مستوى "
            "الجلوكوز بسرعة."
        ),
    },
    "en": {
        ("grains", SAFE): (
            "{name} in small portions with protein and fiber can suit people "
            "with diabetes."
        ),
        ("grains", MODERATE): (
            "{name} has a medium glycemic index; eat it in moderation with "
            "vegetables and protein to soften its effect on blood sugar."
        ),
        ("grains", AVOID): (
            "Avoid {name} because it raises blood sugar quickly; swap it for "
            "whole grains such as brown rice or quinoa."
        ),
        ("proteins", SAFE): (
            "{name} is a good protein source and does not directly raise blood "
            "sugar."
        ),
        ("proteins", MODERATE): (
            "Eat {name} in moderation and watch the fat content and cooking "
            "method."
        ),
        ("proteins", AVOID): (
            "Avoid {name}; its high fat content harms heart health and insulin "
            "sensitivity."
        ),
        ("vegetables", SAFE): (
            "{name} is rich in fiber and slows sugar absorption, an ideal choice "
            "for people with diabetes."
        ),
        ("vegetables", MODERATE): (
            "Enjoy {name} with low-fat, low-sugar dressings for the most benefit."
        ),
        ("fruits", SAFE): (
            "{name} has a low glycemic index and suits people with diabetes in "
            "moderate amounts."
        ),
        ("fruits", MODERATE): (
            "Eat {name} in moderation (one serving), keeping its natural sugar "
            "in mind."
        ),
        ("fruits", AVOID): "Limit {name} because of its high sugar content.",
        ("desserts", MODERATE): (
            "Very small amounts of {name} may be eaten occasionally alongside a "
            "balanced meal."
        ),
        ("desserts", AVOID): (
            "Avoid {name}; its high sugar content raises blood glucose quickly."
        ),
    },
}

_GENERIC_REASONS: dict[str, dict[str, str]] = {
    "ar": {
        SAFE: (
            "{name} آمن لمرضى السكري، منخفض المؤشر الجلايسيمي ومناسب للاستهلاك "
            "المعتدل."
        ),
        MODERATE: (
            "{name} مناسب بشكل معتدل، يفضل تناوله بكميات محدودة ومراقبة تأثيره "
            "على مستوى السكر في الدم."
        ),
        AVOID: (
            "يفضل تجنب {name} لأنه غني بالكربوهيدرات سريعة الامتصاص ويمكن أن "
            "يرفع مستوى السكر بسرعة."
        ),
    },
    "en": {
        SAFE: (
            "{name} is safe for people with diabetes, with a low glycemic index "
            "suited to moderate eating."
        ),
        MODERATE: (
            "{name} is moderately suitable; keep portions limited and monitor "
            "its effect on your blood sugar."
        ),
        AVOID: (
            "Avoid {name}; it is rich in fast-absorbing carbohydrates and can "
            "raise blood sugar quickly."
        ),
    },
}


def evaluate(
    food_names: Sequence[str],
    totals: NutritionTotals | None,
    catalog: Sequence[FoodRecord],
    *,
    language: str | None = None,
    fallbacks: FallbackPolicy | None = None,
) -> SuitabilityVerdict:
    """Return the meal verdict for recognized food names and their totals.

    Per-food tags come from the catalog; names the catalog does not know are
    treated as moderate with a no-data disclaimer. The overall verdict starts
    from the worst per-food tag and is escalated, never relaxed, by the
    aggregate sugar, carbohydrate and glycemic index limits.
    """
    policy = fallbacks or FallbackPolicy()
    resolved_language = policy.language(language)

    details: dict[str, FoodSuitability] = {}
    for name in food_names:
        food = resolve_food_name(name, catalog)
        if food is None:
            details[name] = FoodSuitability(
                suitability=MODERATE,
                reason=policy.unresolved_reason(name, resolved_language),
            )
            continue
        details[name] = FoodSuitability(
            suitability=food.suitability,
            reason=suitability_reason(food, name, resolved_language),
        )

    overall = SAFE
    for detail in details.values():
        overall = _at_least(overall, detail.suitability)

    if totals is not None:
        overall = _escalate(overall, totals.sugar_g, SUGAR_LIMITS)
        overall = _escalate(overall, totals.carbs_g, CARB_LIMITS)
        overall = _escalate(overall, totals.glycemic_index, GLYCEMIC_LIMITS)

    return SuitabilityVerdict(overall=overall, details=details)


def suitability_reason(food: FoodRecord, display_name: str, language: str) -> str:
    """Return the explanation for a catalog food's suitability tag."""
    category = food.category or infer_category(display_name)
    templates = _CATEGORY_REASONS.get(language, _CATEGORY_REASONS["ar"])
    template = templates.get((category or "", food.suitability))
    if template is None:
        generic = _GENERIC_REASONS.get(language, _GENERIC_REASONS["ar"])
        template = generic.get(food.suitability, generic[MODERATE])
    return template.format(name=display_name)


def infer_category(food_name: str) -> str | None:
    """Guess a food category from bilingual keywords in its name."""
    lowered = food_name.casefold()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return None


def _at_least(current: str, floor: str) -> str:
    if _SEVERITY.get(floor, _SEVERITY[MODERATE]) > _SEVERITY[current]:
        return floor if floor in _SEVERITY else MODERATE
    return current


def _escalate(current: str, value: float, limits: tuple[float, float]) -> str:
    moderate_above, avoid_above = limits
    if value > avoid_above:
        return AVOID
    if value > moderate_above:
        return _at_least(current, MODERATE)
    return current
