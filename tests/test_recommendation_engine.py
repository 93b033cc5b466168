import random
import sys
import unittest
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from agrismart.application.services.disease_predictor import (
    DiseasePredictor,
    SimulatedDiseasePredictor,
)
from agrismart.application.services.recommendation_service import RecommendationEngine
from agrismart.domain.crops import current_season, resolve_crop
from agrismart.domain.enums import DiseaseStage, HealthBucket, Season, Severity
from agrismart.domain.tables import CROP_DISEASES, DEFAULT_DISEASES
from agrismart.schemas.recommendation import (
    DiseasePrediction,
    GrowingConditions,
    SoilSample,
    WeatherObservation,
)


class FixedPredictor(DiseasePredictor):
    name = "fixed"

    def __init__(self, disease: str, confidence: float, affected_area: float = 40.0):
        self.disease = disease
        self.confidence = confidence
        self.affected_area = affected_area
        self.calls = []

    def predict(self, crop_type: Optional[str], image_ref: Optional[str] = None) -> DiseasePrediction:
        self.calls.append((crop_type, image_ref))
        return DiseasePrediction(
            disease=self.disease,
            confidence=self.confidence,
            affected_area=self.affected_area,
            source=self.name,
        )


class DiseaseDetectionTests(unittest.TestCase):
    def test_known_crop_stays_within_its_table(self) -> None:
        engine = RecommendationEngine(rng=random.Random(7))
        for _ in range(200):
            result = engine.detect_disease("Rice")
            self.assertIn(result.disease, CROP_DISEASES["Rice"])
            self.assertGreaterEqual(result.confidence, 70)
            self.assertLessEqual(result.confidence, 95)
            self.assertGreaterEqual(result.affected_area, 20)
            self.assertLessEqual(result.affected_area, 80)

    def test_crop_aliases_resolve(self) -> None:
        engine = RecommendationEngine(rng=random.Random(3))
        for _ in range(50):
            self.assertIn(engine.detect_disease("  paddy ").disease, CROP_DISEASES["Rice"])

    def test_missing_or_unknown_crop_uses_default_slice(self) -> None:
        engine = RecommendationEngine(rng=random.Random(11))
        for crop in (None, "", "Dragonfruit"):
            for _ in range(50):
                self.assertIn(engine.detect_disease(crop).disease, DEFAULT_DISEASES)

    def test_severity_and_stage_thresholds(self) -> None:
        cases = [
            (90, Severity.CRITICAL, DiseaseStage.ADVANCED),
            (80, Severity.HIGH, DiseaseStage.MID),
            (70, Severity.MEDIUM, DiseaseStage.MID),
            (60, Severity.LOW, DiseaseStage.EARLY),
        ]
        for confidence, severity, stage in cases:
            engine = RecommendationEngine(FixedPredictor("Leaf Blast", confidence))
            result = engine.detect_disease("Rice")
            self.assertEqual(result.severity, severity, confidence)
            self.assertEqual(result.stage, stage, confidence)

    def test_unknown_disease_gets_default_treatment(self) -> None:
        engine = RecommendationEngine(FixedPredictor("Brown Spot", 78))
        result = engine.detect_disease("Rice")
        self.assertEqual(result.treatment_plan.chemical[0].name, "Streptomycin")
        self.assertEqual(
            [action.description for action in result.recommended_actions],
            ["Remove infected leaves", "Apply Streptomycin", "Use resistant varieties"],
        )
        self.assertEqual(
            [action.priority for action in result.recommended_actions], [5, 4, 3]
        )
        self.assertEqual(result.symptoms[0], "Circular brown spots")

    def test_actions_follow_the_matched_plan(self) -> None:
        engine = RecommendationEngine(FixedPredictor("Powdery Mildew", 72))
        result = engine.detect_disease("Wheat")
        self.assertEqual(result.recommended_actions[1].description, "Apply Sulfur")
        self.assertEqual(result.recommended_actions[0].timeline, "Within 24 hours")

    def test_out_of_range_prediction_is_clamped(self) -> None:
        engine = RecommendationEngine(FixedPredictor("Leaf Blast", 140, affected_area=-10))
        result = engine.detect_disease("Rice")
        self.assertEqual(result.confidence, 100)
        self.assertEqual(result.affected_area, 0)
        self.assertEqual(result.severity, Severity.CRITICAL)

    def test_supplied_weather_is_echoed(self) -> None:
        engine = RecommendationEngine(FixedPredictor("Leaf Blast", 80))
        result = engine.detect_disease(
            "Rice", weather=WeatherObservation(temperature=31.26, humidity=120)
        )
        self.assertEqual(result.weather_factors.temperature, 31.3)
        self.assertEqual(result.weather_factors.humidity, 100)

    def test_drawn_weather_ranges(self) -> None:
        engine = RecommendationEngine(FixedPredictor("Leaf Blast", 80), rng=random.Random(5))
        for _ in range(100):
            weather = engine.detect_disease("Rice").weather_factors
            self.assertTrue(25 <= weather.temperature <= 35)
            self.assertTrue(60 <= weather.humidity <= 90)

    def test_image_reference_reaches_predictor(self) -> None:
        predictor = FixedPredictor("Leaf Blast", 80)
        RecommendationEngine(predictor).detect_disease("Rice", "uploads/leaf.jpg")
        self.assertEqual(predictor.calls, [("Rice", "uploads/leaf.jpg")])

    def test_result_serializes_camel_case(self) -> None:
        engine = RecommendationEngine(FixedPredictor("Leaf Blast", 80))
        data = engine.detect_disease("Rice").to_json()
        for key in ("affectedArea", "treatmentPlan", "recommendedActions", "weatherFactors"):
            self.assertIn(key, data)
        self.assertEqual(data["severity"], "high")
        self.assertIn("safetyPeriod", data["treatmentPlan"]["chemical"][0])

    def test_seeded_engines_repeat(self) -> None:
        first = RecommendationEngine(rng=random.Random(42)).detect_disease("Tomato")
        second = RecommendationEngine(rng=random.Random(42)).detect_disease("Tomato")
        self.assertEqual(first, second)


class SoilHealthTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = RecommendationEngine(SimulatedDiseasePredictor(random.Random(1)))

    def test_healthy_sample_scores_full_marks(self) -> None:
        report = self.engine.analyze_soil_health(
            SoilSample(ph=6.5, nitrogen=300, phosphorus=30, potassium=250, organic_matter=3)
        )
        self.assertEqual(report.health_score, 100)
        self.assertEqual(report.classification, HealthBucket.EXCELLENT)
        self.assertEqual(report.recommendations, [])

    def test_out_of_range_readings_are_clamped(self) -> None:
        report = self.engine.analyze_soil_health(
            SoilSample(ph=20, nitrogen=-5, phosphorus=30, potassium=250, organic_matter=500)
        )
        self.assertEqual(report.health_score, 55)
        self.assertEqual(report.classification, HealthBucket.GOOD)
        issues = {item.issue: item.solution for item in report.recommendations}
        self.assertEqual(issues["pH imbalance"], "Add sulfur to decrease pH")
        self.assertIn("Low nitrogen", issues)

    def test_acidic_soil_gets_lime(self) -> None:
        report = self.engine.analyze_soil_health(
            SoilSample(ph=5.2, nitrogen=300, phosphorus=30, potassium=250, organic_matter=3)
        )
        self.assertEqual(report.health_score, 75)
        self.assertEqual(report.classification, HealthBucket.GOOD)
        self.assertEqual(report.recommendations[0].solution, "Add lime to increase pH")

    def test_missing_readings_score_nothing(self) -> None:
        report = self.engine.analyze_soil_health(SoilSample())
        self.assertEqual(report.health_score, 0)
        self.assertEqual(report.classification, HealthBucket.POOR)
        self.assertEqual(len(report.recommendations), 5)
        self.assertEqual(report.recommendations[0].solution, "Get soil pH tested")

    def test_thresholds_are_exclusive(self) -> None:
        report = self.engine.analyze_soil_health(
            SoilSample(ph=6.0, nitrogen=250, phosphorus=25, potassium=200, organic_matter=2)
        )
        self.assertEqual(report.health_score, 25)
        self.assertEqual(report.classification, HealthBucket.POOR)

    def test_sample_accepts_wire_alias(self) -> None:
        sample = SoilSample.model_validate(
            {"pH": 7, "nitrogen": 300, "phosphorus": 30, "potassium": 250, "organicMatter": 3}
        )
        self.assertEqual(self.engine.analyze_soil_health(sample).health_score, 100)


class CropSuitabilityTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = RecommendationEngine(SimulatedDiseasePredictor(random.Random(1)))

    def test_ideal_rice_conditions(self) -> None:
        conditions = GrowingConditions(
            season=Season.KHARIF,
            soil_type="clay",
            ph=6.0,
            weather=WeatherObservation(temperature=28),
        )
        result = self.engine.score_crop("Rice", conditions)
        self.assertEqual(result.score, 100)
        self.assertEqual(result.bucket, HealthBucket.EXCELLENT)

    def test_hostile_wheat_conditions(self) -> None:
        conditions = GrowingConditions(
            season=Season.KHARIF,
            soil_type="black",
            ph=9,
            weather=WeatherObservation(temperature=40),
        )
        result = self.engine.score_crop("Wheat", conditions)
        self.assertEqual(result.score, 20)
        self.assertEqual(result.bucket, HealthBucket.POOR)

    def test_unknown_factors_score_partially(self) -> None:
        result = self.engine.score_crop("wheat", GrowingConditions(season=Season.RABI))
        self.assertEqual(result.crop, "Wheat")
        self.assertEqual(result.score, 73)
        self.assertEqual(result.bucket, HealthBucket.GOOD)

    def test_near_optimal_ph_gets_partial_points(self) -> None:
        base = dict(season=Season.KHARIF, soil_type="clay", weather=WeatherObservation(temperature=28))
        inside = self.engine.score_crop("Rice", GrowingConditions(ph=6.5, **base))
        near = self.engine.score_crop("Rice", GrowingConditions(ph=7.2, **base))
        far = self.engine.score_crop("Rice", GrowingConditions(ph=9.0, **base))
        self.assertEqual(inside.score - near.score, 10)
        self.assertEqual(near.score - far.score, 10)

    def test_season_aliases(self) -> None:
        self.assertEqual(GrowingConditions(season="monsoon").season, Season.KHARIF)
        self.assertEqual(GrowingConditions(season=" WINTER ").season, Season.RABI)
        self.assertEqual(GrowingConditions(season="Zaid").season, Season.ZAID)

    def test_unknown_crop(self) -> None:
        self.assertIsNone(self.engine.score_crop("Dragonfruit", GrowingConditions()))
        self.assertIsNone(resolve_crop(None))

    def test_ranking_is_sorted_and_filtered(self) -> None:
        conditions = GrowingConditions(
            season=Season.KHARIF,
            soil_type="alluvial",
            ph=6.5,
            weather=WeatherObservation(temperature=30),
        )
        ranked = self.engine.recommend_crops(conditions)
        scores = [item.suitability_score for item in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertTrue(all(score > 30 for score in scores))
        self.assertEqual(ranked[0].name, "Rice")
        self.assertLessEqual(len(ranked), 10)

    def test_ranking_limit_and_floor(self) -> None:
        conditions = GrowingConditions(season=Season.RABI)
        self.assertEqual(len(self.engine.recommend_crops(conditions, limit=3)), 3)
        strict = self.engine.recommend_crops(conditions, min_score=70)
        self.assertTrue(all(item.suitability_score > 70 for item in strict))

    def test_practices_and_risks(self) -> None:
        conditions = GrowingConditions(
            season=Season.KHARIF,
            soil_type="clay",
            ph=5.6,
            nitrogen=200,
            weather=WeatherObservation(temperature=28, humidity=85, rainfall=80),
        )
        rice = next(item for item in self.engine.recommend_crops(conditions) if item.name == "Rice")
        self.assertIn("Apply nitrogen fertilizer as per soil test", rice.best_practices)
        self.assertIn("Apply lime to correct soil acidity", rice.best_practices)
        self.assertIn("High humidity may cause fungal diseases", rice.risks)
        self.assertIn("Watch for stem borer and leaf folder", rice.risks)

    def test_calm_weather_has_normal_risk(self) -> None:
        ranked = self.engine.recommend_crops(GrowingConditions(season=Season.RABI))
        wheat = next(item for item in ranked if item.name == "Wheat")
        self.assertEqual(wheat.risks, ["Normal risk levels"])

    def test_recommendation_set_fills_season_and_factors(self) -> None:
        result = self.engine.crop_recommendation_set(GrowingConditions(soil_type="loamy"))
        self.assertEqual(result.season, current_season())
        self.assertEqual(result.region, "Default")
        self.assertEqual(result.factors["soilType"], "loamy")
        self.assertEqual(result.factors["soilPH"], "Not available")


class CropCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = RecommendationEngine(SimulatedDiseasePredictor(random.Random(1)))

    def test_season_boundaries(self) -> None:
        expected = {
            1: Season.RABI,
            3: Season.RABI,
            4: Season.ZAID,
            5: Season.ZAID,
            6: Season.KHARIF,
            10: Season.KHARIF,
            11: Season.RABI,
            12: Season.RABI,
        }
        for month, season in expected.items():
            self.assertEqual(current_season(month), season, month)

    def test_crop_details(self) -> None:
        details = self.engine.crop_details("Rice")
        self.assertEqual(details.best_months, ["June", "July"])
        self.assertEqual(details.irrigation["frequency"], "Every 3-4 days")
        self.assertIn("Stem borer", details.pests)

    def test_crop_details_for_uncatalogued_extras(self) -> None:
        details = self.engine.crop_details("Groundnut")
        self.assertEqual(details.diseases, ["Various fungal and bacterial diseases"])
        self.assertIsNone(self.engine.crop_details("Dragonfruit"))

    def test_seasonal_calendar(self) -> None:
        calendar = self.engine.seasonal_calendar()
        self.assertEqual(set(calendar["calendar"]), {"Kharif", "Rabi", "Zaid"})
        self.assertIn(calendar["currentSeason"], {"Kharif", "Rabi", "Zaid"})


if __name__ == "__main__":
    unittest.main()
