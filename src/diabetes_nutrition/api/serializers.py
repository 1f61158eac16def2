"""JSON response shapes for the public API."""

from diabetes_nutrition.domain.analysis import FoodAnalysis
from diabetes_nutrition.domain.catalog import FoodRecord
from diabetes_nutrition.domain.meals import ChatExchange, MealLogEntry, MealLogView
from diabetes_nutrition.domain.profile import UserProfile


def food_payload(food: FoodRecord) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "nameEn": food.alternate_name,
        "calories": food.calories,
        "carbs": food.carbs_g,
        "protein": food.protein_g,
        "fat": food.fat_g,
        "sugar": food.sugar_g,
        "glycemicIndex": food.glycemic_index,
        "diabeticSuitability": food.suitability,
        "category": food.category,
    }


def analysis_payload(analysis: FoodAnalysis) -> dict[str, object]:
    """Render a meal analysis with the camelCase keys clients expect."""
    totals = analysis.totals
    nutrition = None
    if totals is not None:
        nutrition = {
            "calories": totals.calories,
            "carbs": totals.carbs_g,
            "protein": totals.protein_g,
            "fat": totals.fat_g,
            "sugar": totals.sugar_g,
            "glycemicIndex": totals.glycemic_index,
        }
    return {
        "recognizedFoods": [item.model_dump() for item in analysis.recognized],
        "nutritionInfo": nutrition,
        "diabetesSuitability": {
            "overall": analysis.verdict.overall,
            "details": {
                name: {"suitability": detail.suitability, "reason": detail.reason}
                for name, detail in analysis.verdict.details.items()
            },
        },
        "foodDetected": analysis.food_detected,
    }


def meal_log_payload(entry: MealLogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "foodId": entry.food_id,
        "date": entry.logged_at.isoformat(),
        "amount": entry.amount_grams,
        "notes": entry.notes,
    }


def meal_log_view_payload(view: MealLogView) -> dict[str, object]:
    payload = meal_log_payload(view.entry)
    payload["food"] = food_payload(view.food) if view.food is not None else None
    return payload


def chat_message_payload(exchange: ChatExchange) -> dict[str, object]:
    return {
        "id": exchange.id,
        "message": exchange.message,
        "isUser": exchange.is_from_user,
        "createdAt": exchange.created_at.isoformat(),
    }


def profile_payload(profile: UserProfile) -> dict[str, object]:
    return {
        "userId": profile.user_id,
        "name": profile.name,
        "age": profile.age,
        "diabetesType": profile.diabetes_type,
        "preferences": profile.preferences,
        "language": profile.language,
        "createdAt": profile.created_at.isoformat(),
    }
