"""Static agronomy tables behind the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


DISEASE_CLASSES: Tuple[str, ...] = (
    "Healthy",
    "Bacterial Leaf Blight",
    "Brown Spot",
    "Leaf Smut",
    "Bacterial Leaf Streak",
    "Leaf Blast",
    "Tungro",
    "Sheath Blight",
    "False Smut",
    "Downy Mildew",
    "Bacterial Wilt",
    "Powdery Mildew",
    "Black Rot",
    "Anthracnose",
    "Leaf Curl",
    "Mosaic Virus",
    "Gray Leaf Spot",
    "Common Rust",
    "Northern Leaf Blight",
    "Cercospora Leaf Spot",
)

CROP_DISEASES: Dict[str, Tuple[str, ...]] = {
    "Rice": ("Bacterial Leaf Blight", "Brown Spot", "Leaf Blast", "Sheath Blight"),
    "Wheat": ("Powdery Mildew", "Leaf Rust", "Black Rust", "Leaf Blight"),
    "Tomato": ("Bacterial Wilt", "Leaf Curl", "Mosaic Virus", "Anthracnose"),
    "Cotton": ("Bacterial Blight", "Gray Mildew", "Leaf Spot", "Wilt"),
    "Maize": ("Gray Leaf Spot", "Common Rust", "Northern Leaf Blight", "Leaf Blight"),
}

# used when the crop is missing or has no list of its own
DEFAULT_DISEASES: Tuple[str, ...] = DISEASE_CLASSES[1:5]

DEFAULT_TREATMENT = "Bacterial Leaf Blight"

TREATMENTS: Dict[str, dict] = {
    "Bacterial Leaf Blight": {
        "organic": [
            {"name": "Neem Oil Spray", "dosage": "2-3ml per liter", "frequency": "Weekly", "cost": 150},
            {"name": "Pseudomonas fluorescens", "dosage": "10g per liter", "frequency": "Bi-weekly", "cost": 200},
        ],
        "chemical": [
            {"name": "Streptomycin", "dosage": "1g per 3 liters", "frequency": "Weekly", "safety_period": "7 days", "cost": 250},
            {"name": "Copper Oxychloride", "dosage": "2g per liter", "frequency": "Bi-weekly", "safety_period": "10 days", "cost": 180},
        ],
        "immediate": ["Remove infected leaves", "Improve field drainage", "Avoid excessive nitrogen"],
        "preventive": ["Use resistant varieties", "Maintain proper spacing", "Balanced fertilization"],
    },
    "Powdery Mildew": {
        "organic": [
            {"name": "Baking Soda Solution", "dosage": "1 tbsp per liter", "frequency": "Weekly", "cost": 50},
            {"name": "Milk Spray", "dosage": "1:9 ratio with water", "frequency": "Weekly", "cost": 80},
        ],
        "chemical": [
            {"name": "Sulfur", "dosage": "2g per liter", "frequency": "Weekly", "safety_period": "3 days", "cost": 120},
            {"name": "Propiconazole", "dosage": "1ml per liter", "frequency": "Bi-weekly", "safety_period": "14 days", "cost": 300},
        ],
        "immediate": ["Remove affected parts", "Increase air circulation", "Avoid overhead watering"],
        "preventive": ["Plant resistant varieties", "Proper spacing", "Morning watering only"],
    },
    "Leaf Blast": {
        "organic": [
            {"name": "Trichoderma", "dosage": "5g per liter", "frequency": "Weekly", "cost": 180},
            {"name": "Garlic Extract", "dosage": "20ml per liter", "frequency": "Weekly", "cost": 100},
        ],
        "chemical": [
            {"name": "Tricyclazole", "dosage": "0.6g per liter", "frequency": "Bi-weekly", "safety_period": "21 days", "cost": 350},
            {"name": "Carbendazim", "dosage": "1g per liter", "frequency": "Bi-weekly", "safety_period": "14 days", "cost": 200},
        ],
        "immediate": ["Apply fungicide immediately", "Remove infected leaves", "Reduce nitrogen application"],
        "preventive": ["Seed treatment", "Use resistant varieties", "Avoid excess nitrogen"],
    },
}

SYMPTOMS: Dict[str, List[str]] = {
    "Bacterial Leaf Blight": ["Water-soaked lesions", "Yellow halos around spots", "Wilting of leaves"],
    "Powdery Mildew": ["White powdery coating", "Distorted leaves", "Stunted growth"],
    "Leaf Blast": ["Diamond-shaped lesions", "Gray centers with brown borders", "Leaf death"],
    "Brown Spot": ["Circular brown spots", "Yellow margins", "Premature leaf drop"],
    "Bacterial Wilt": ["Wilting during day", "Recovery at night initially", "Vascular discoloration"],
}
DEFAULT_SYMPTOMS: List[str] = ["Discoloration", "Spots or lesions", "Abnormal growth"]


@dataclass(frozen=True)
class CropProfile:
    name: str
    seasons: Tuple[str, ...]
    soil_types: Tuple[str, ...]
    ph_min: float
    ph_max: float
    temp_min: float
    temp_max: float
    temp_optimal: float
    rain_min: float
    rain_max: float
    rain_optimal: float
    water_requirement: str
    growing_period: str
    market_demand: str
    profitability: str

    @property
    def ph_optimal(self) -> float:
        return round((self.ph_min + self.ph_max) / 2, 2)


YEAR_ROUND = "Year-round"

CROP_PROFILES: Dict[str, CropProfile] = {
    profile.name: profile
    for profile in (
        CropProfile("Wheat", ("Rabi",), ("Alluvial", "Clay", "Loamy"), 6.0, 7.5, 10, 25, 20, 400, 700, 550, "Medium", "120-140 days", "High", "High"),
        CropProfile("Rice", ("Kharif",), ("Alluvial", "Clay"), 5.5, 7.0, 20, 35, 28, 1000, 2000, 1500, "High", "120-150 days", "High", "High"),
        CropProfile("Maize", ("Kharif",), ("Alluvial", "Loamy", "Sandy"), 5.5, 7.5, 18, 32, 25, 600, 1100, 800, "Medium", "90-120 days", "High", "Medium"),
        CropProfile("Cotton", ("Kharif",), ("Black", "Alluvial"), 5.8, 8.0, 21, 35, 28, 500, 1000, 700, "Medium", "180-200 days", "High", "High"),
        CropProfile("Potato", ("Rabi",), ("Loamy", "Sandy"), 5.0, 6.5, 15, 25, 20, 400, 800, 600, "Medium", "90-120 days", "High", "High"),
        CropProfile("Tomato", (YEAR_ROUND,), ("Loamy", "Sandy", "Clay"), 6.0, 7.0, 18, 30, 24, 600, 1000, 800, "Medium", "60-90 days", "High", "High"),
        CropProfile("Onion", ("Rabi",), ("Alluvial", "Loamy"), 6.0, 7.5, 13, 24, 20, 400, 800, 600, "Low", "120-150 days", "High", "Medium"),
        CropProfile("Pulses", ("Kharif", "Rabi"), ("Loamy", "Clay", "Sandy"), 6.0, 7.5, 20, 30, 25, 400, 600, 500, "Low", "90-120 days", "Medium", "Medium"),
        CropProfile("Sugarcane", (YEAR_ROUND,), ("Alluvial", "Loamy"), 6.0, 8.0, 20, 40, 30, 1200, 2500, 1800, "High", "300-365 days", "High", "High"),
        CropProfile("Groundnut", ("Kharif",), ("Sandy", "Loamy"), 6.0, 6.5, 25, 35, 30, 400, 1000, 600, "Medium", "100-130 days", "Medium", "Medium"),
    )
}

COMMON_DISEASES: Dict[str, List[str]] = {
    "Wheat": ["Rust", "Powdery mildew", "Karnal bunt"],
    "Rice": ["Blast", "Bacterial leaf blight", "Sheath blight"],
    "Cotton": ["Wilt", "Grey mildew", "Bacterial blight"],
    "Tomato": ["Early blight", "Late blight", "Leaf curl"],
    "Potato": ["Late blight", "Early blight", "Common scab"],
}
COMMON_PESTS: Dict[str, List[str]] = {
    "Wheat": ["Aphids", "Termites", "Stem borer"],
    "Rice": ["Stem borer", "Leaf folder", "Brown plant hopper"],
    "Cotton": ["Bollworm", "Whitefly", "Aphids"],
    "Tomato": ["Fruit borer", "Whitefly", "Leaf miner"],
    "Potato": ["Cutworm", "Aphids", "Potato tuber moth"],
}

PLANTING_MONTHS: Dict[str, List[str]] = {
    "Kharif": ["June", "July"],
    "Rabi": ["October", "November"],
    "Zaid": ["April", "May"],
    YEAR_ROUND: ["Any month with suitable conditions"],
}

IRRIGATION_FREQUENCY: Dict[str, str] = {
    "High": "Every 3-4 days",
    "Medium": "Every 5-7 days",
    "Low": "Every 10-12 days",
}

SEASONAL_CALENDAR: Dict[str, dict] = {
    "Kharif": {
        "duration": "June to October",
        "crops": ["Rice", "Cotton", "Maize", "Groundnut", "Sugarcane"],
        "activities": {
            "June": "Land preparation, Sowing",
            "July": "Transplanting, Weeding",
            "August": "Fertilizer application, Pest control",
            "September": "Monitoring, Irrigation",
            "October": "Harvesting begins",
        },
    },
    "Rabi": {
        "duration": "October to March",
        "crops": ["Wheat", "Potato", "Onion", "Mustard", "Gram"],
        "activities": {
            "October": "Land preparation",
            "November": "Sowing",
            "December": "Germination, First irrigation",
            "January": "Growth stage, Weeding",
            "February": "Flowering, Disease control",
            "March": "Harvesting",
        },
    },
    "Zaid": {
        "duration": "April to June",
        "crops": ["Watermelon", "Cucumber", "Muskmelon", "Fodder"],
        "activities": {
            "April": "Sowing",
            "May": "Growth and maintenance",
            "June": "Harvesting",
        },
    },
}
