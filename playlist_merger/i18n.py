# i18n.py
import locale

MESSAGES = {
    "en": {
        "help_file": "File containing one YouTube playlist URL per line.",
        "help_keyfile": "File containing the YouTube Data API key.",
        "help_strip_key": "Strip surrounding whitespace from the API key.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
        "error": "Error",
        "reading_inputs": "Reading playlists from '{file}'...",
        "playlists_found": "{count} playlist(s) to merge.",
        "fetching_playlists": "Fetching playlists from YouTube...",
        "merging_playlists": "Merging {count} playlist(s)...",
        "merge_completed": "{count} videos merged.",
    },
    "fr": {
        "help_file": "Fichier contenant une URL de playlist YouTube par ligne.",
        "help_keyfile": "Fichier contenant la clé de l'API YouTube Data.",
        "help_strip_key": "Supprimer les espaces autour de la clé d'API.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
        "error": "Erreur",
        "reading_inputs": "Lecture des playlists depuis '{file}'...",
        "playlists_found": "{count} playlist(s) à fusionner.",
        "fetching_playlists": "Récupération des playlists sur YouTube...",
        "merging_playlists": "Fusion de {count} playlist(s)...",
        "merge_completed": "{count} vidéos fusionnées.",
    },
}

_current_lang = "en"


def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "fr" if lang_code and lang_code.lower().startswith("fr") else "en"
    except (ValueError, TypeError):
        return "en"


def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"


def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = "en"

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        # This can happen if a placeholder is missing in kwargs
        return f"Formatting error for key '{key}': missing placeholder {e}"


# Initialize with default system language
set_lang(get_default_lang())
