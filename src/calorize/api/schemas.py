"""Request and response models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field

from calorize.domain.goals import Gender, GoalDirection, GoalTargets
from calorize.domain.meals import Meal, MealType
from calorize.domain.nutrition import FoodCategory, FoodItem, NutrientTotals
from calorize.domain.sessions import SessionContext
from calorize.domain.sharing import SharedDiet
from calorize.domain.stats import DailySummary, NutrientTable
from calorize.domain.users import UserProfile, UserRecord


class RegisterBody(BaseModel):
    """Registration form."""

    name: str
    email: str
    password: str
    weight_kg: float
    height_cm: int
    gender: Gender = Gender.OTHER
    goal: GoalDirection = GoalDirection.MAINTAIN


class LoginBody(BaseModel):
    email: str
    password: str


class ProfileUpdateBody(BaseModel):
    """Profile fields to change; omitted fields stay as they are."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    height_cm: int | None = None
    gender: Gender | None = None
    goal: GoalDirection | None = None


class WeightBody(BaseModel):
    weight_kg: float
    recorded_on: date | None = None


class AddFoodBody(BaseModel):
    """A catalog food and the grams eaten."""

    food_name: str
    grams: float
    day: date | None = None
    time: str | None = None


class CatalogFoodsBody(BaseModel):
    names: list[str] = Field(default_factory=list)
    day: date | None = None


class ShareBody(BaseModel):
    recipient_id: int
    day: str


class GoalsOut(BaseModel):
    calories: float
    protein: float
    carbohydrate: float
    fat: float

    @classmethod
    def from_domain(cls, targets: GoalTargets) -> "GoalsOut":
        return cls(
            calories=targets.calories,
            protein=targets.protein,
            carbohydrate=targets.carbohydrate,
            fat=targets.fat,
        )


class UserOut(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserOut":
        return cls(id=record.id, name=record.name, email=record.email)


class ProfileOut(BaseModel):
    """A user's profile with the current weight and goals."""

    id: int
    name: str
    email: str
    weight_kg: float
    height_cm: int
    gender: Gender
    goal: GoalDirection
    friend_ids: list[int]
    goals: GoalsOut

    @classmethod
    def from_domain(cls, user: UserProfile) -> "ProfileOut":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            weight_kg=user.current_weight,
            height_cm=user.height_cm,
            gender=user.gender,
            goal=user.goal,
            friend_ids=list(user.friend_ids),
            goals=GoalsOut.from_domain(user.goal_targets),
        )


class SessionOut(BaseModel):
    token: str
    user: ProfileOut

    @classmethod
    def from_domain(cls, context: SessionContext) -> "SessionOut":
        return cls(token=context.token, user=ProfileOut.from_domain(context.user))


class WeightEntryOut(BaseModel):
    recorded_on: date
    weight_kg: float


class WeightHistoryOut(BaseModel):
    entries: list[WeightEntryOut]
    goals: GoalsOut

    @classmethod
    def from_history(
        cls, history: dict[date, float], targets: GoalTargets
    ) -> "WeightHistoryOut":
        return cls(
            entries=[
                WeightEntryOut(recorded_on=day, weight_kg=weight)
                for day, weight in sorted(history.items())
            ],
            goals=GoalsOut.from_domain(targets),
        )


class FoodOut(BaseModel):
    id: int
    name: str
    category: FoodCategory
    energy_kcal: float
    protein_g: float
    fat_g: float
    carbohydrate_g: float
    fiber_g: float
    calcium_mg: float

    @classmethod
    def from_domain(cls, food: FoodItem) -> "FoodOut":
        return cls(
            id=food.id,
            name=food.name,
            category=food.category,
            energy_kcal=food.energy_kcal,
            protein_g=food.protein_g,
            fat_g=food.fat_g,
            carbohydrate_g=food.carbohydrate_g,
            fiber_g=food.fiber_g,
            calcium_mg=food.calcium_mg,
        )


class NutrientTotalsOut(BaseModel):
    energy_kcal: float
    protein_g: float
    fat_g: float
    carbohydrate_g: float
    fiber_g: float
    calcium_mg: float

    @classmethod
    def from_domain(cls, totals: NutrientTotals) -> "NutrientTotalsOut":
        return cls(
            energy_kcal=totals.energy_kcal,
            protein_g=totals.protein_g,
            fat_g=totals.fat_g,
            carbohydrate_g=totals.carbohydrate_g,
            fiber_g=totals.fiber_g,
            calcium_mg=totals.calcium_mg,
        )


class MealOut(BaseModel):
    meal_type: MealType
    time: str
    foods: list[FoodOut]
    calories: float
    protein: float
    carbohydrate: float
    fat: float

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealOut":
        return cls(
            meal_type=meal.meal_type,
            time=meal.time,
            foods=[FoodOut.from_domain(food) for food in meal.foods],
            calories=meal.calories,
            protein=meal.protein,
            carbohydrate=meal.carbohydrate,
            fat=meal.fat,
        )


class SummaryOut(BaseModel):
    """Consumed nutrients for a day against the user's goals."""

    day: date
    consumed: NutrientTotalsOut
    goals: GoalsOut
    calorie_progress: float

    @classmethod
    def from_domain(cls, summary: DailySummary) -> "SummaryOut":
        return cls(
            day=summary.day,
            consumed=NutrientTotalsOut.from_domain(summary.consumed),
            goals=GoalsOut.from_domain(summary.targets),
            calorie_progress=summary.calorie_progress,
        )


class TableOut(BaseModel):
    day: date
    foods: list[FoodOut]
    total: NutrientTotalsOut

    @classmethod
    def from_domain(cls, table: NutrientTable) -> "TableOut":
        return cls(
            day=table.day,
            foods=[FoodOut.from_domain(food) for food in table.foods],
            total=NutrientTotalsOut.from_domain(table.total),
        )


class SharedDietOut(BaseModel):
    sender: UserOut
    recipient: UserOut
    day: date
    foods: list[FoodOut]
    total_calories: float

    @classmethod
    def from_domain(cls, diet: SharedDiet) -> "SharedDietOut":
        return cls(
            sender=UserOut.from_record(diet.sender.to_record()),
            recipient=UserOut.from_record(diet.recipient.to_record()),
            day=diet.shared_on,
            foods=[FoodOut.from_domain(food) for food in diet.foods],
            total_calories=diet.total_calories,
        )
