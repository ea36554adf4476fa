"""
dashboard/translations.py

UI strings for the vendor dashboard in English and Hindi.
"""

from __future__ import annotations

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "hi")
DEFAULT_LANGUAGE = "en"

LANGUAGE_LABELS: dict[str, str] = {
    "en": "English",
    "hi": "हिंदी",
}

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Predictive Analytics",
        "welcome": "Welcome back, Vendor!!",
        "live_status": "Live Status: Active",
        "simulate": "Simulate Data",
        "update": "Update & Predict",
        "manual_title": "Manual Data Simulation",
        "add_sales": "Add Sales (₹)",
        "orders_placed": "Orders Placed",
        "orders_served": "Orders Served",
        "avg_rating": "Avg Rating",
        "earnings": "Today's Earnings",
        "efficiency": "Order Efficiency",
        "quick_stats": "Quick Stats",
        "total_dishes": "Total Dishes",
        "consultant": "Smart Consultant",
        "predictions": "AI Predictions",
        "credibility": "Credibility",
        "growth": "Weekly Revenue Growth",
        "served": "Served",
        "missed": "Missed",
        "valid_sales": "Please enter a valid sales amount.",
        "valid_orders": "Please enter valid order counts.",
        "valid_served": "Orders served cannot exceed orders placed.",
        "valid_rating": "Rating must be between 0 and 5.",
        "success_update": "Data Updated Successfully!",
        "load_failed": "Failed to load platform data.",
        "update_failed": "Failed to update data. Please ensure the backend is running.",
    },
    "hi": {
        "title": "अनुमानित विश्लेषण (Analytics)",
        "welcome": "स्वागत है, वेंडर!!",
        "live_status": "लाइव स्थिति: सक्रिय",
        "simulate": "डाटा सिमुलेट करें",
        "update": "अपडेट और भविष्यवाणी",
        "manual_title": "मैनुअल डेटा सिमुलेशन",
        "add_sales": "बिक्री जोड़ें (₹)",
        "orders_placed": "ऑर्डर मिले",
        "orders_served": "ऑर्डर पूरे किए",
        "avg_rating": "औसत रेटिंग",
        "earnings": "आज की कमाई",
        "efficiency": "ऑर्डर दक्षता",
        "quick_stats": "त्वरित आंकड़े",
        "total_dishes": "कुल व्यंजन",
        "consultant": "स्मार्ट सलाहकार",
        "predictions": "AI भविष्यवाणियां",
        "credibility": "विश्वसनीयता",
        "growth": "साप्ताहिक राजस्व वृद्धि",
        "served": "पूरे किए",
        "missed": "छूटे हुए",
        "valid_sales": "कृपया वैध बिक्री राशि दर्ज करें।",
        "valid_orders": "कृपया वैध ऑर्डर संख्या दर्ज करें।",
        "valid_served": "पूरे किए गए ऑर्डर मिले हुए ऑर्डर से अधिक नहीं हो सकते।",
        "valid_rating": "रेटिंग 0 और 5 के बीच होनी चाहिए।",
        "success_update": "डेटा सफलतापूर्वक अपडेट किया गया!",
        "load_failed": "प्लेटफ़ॉर्म डेटा लोड नहीं हो सका।",
        "update_failed": "डेटा अपडेट नहीं हो सका। कृपया सुनिश्चित करें कि बैकएंड चल रहा है।",
    },
}


def translate(key: str, language: str) -> str:
    """
    Look up *key* for *language*, falling back to English, then to the key.
    """

    table = TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])
    return table.get(key) or TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)
