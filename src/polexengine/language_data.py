"""Static language data: known language specs and locale aliases.

The table lists language, country, modifier, English name and native name.
Country and modifier are "" when the spec does not carry one; the native
name is "" where none is recorded.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from types import MappingProxyType

__all__ = ["LANGUAGE_ALIASES", "LANGUAGE_SPECS", "LanguageSpec"]


@dataclass(frozen=True, slots=True)
class LanguageSpec:
    """One row of the language table.

    Attributes:
        language: ISO 639 code ("de", "ast")
        country: ISO 3166 code ("DE"), "" for none
        modifier: Variant ("latin", "Latn"), "" for none
        name: English name
        native_name: Name in the language itself, "" when not recorded
    """

    language: str
    country: str
    modifier: str
    name: str
    native_name: str


# fmt: off
LANGUAGE_SPECS: tuple[LanguageSpec, ...] = (
    LanguageSpec("aa", "", "", "Afar", "ʿAfár af"),
    LanguageSpec("af", "", "", "Afrikaans", "Afrikaans"),
    LanguageSpec("af", "ZA", "", "Afrikaans (South Africa)", ""),
    LanguageSpec("am", "", "", "Amharic", "ኣማርኛ"),
    LanguageSpec("ar", "", "", "Arabic", "العربية"),
    LanguageSpec("ar", "AR", "", "Arabic (Argentina)", ""),
    LanguageSpec("ar", "OM", "", "Arabic (Oman)", ""),
    LanguageSpec("ar", "SA", "", "Arabic (Saudi Arabia)", ""),
    LanguageSpec("ar", "SY", "", "Arabic (Syrian Arab Republic)", ""),
    LanguageSpec("ar", "TN", "", "Arabic (Tunisia)", ""),
    LanguageSpec("as", "", "", "Assamese", "অসমীয়া"),
    LanguageSpec("ast", "", "", "Asturian", "Asturianu"),
    LanguageSpec("ay", "", "", "Aymara", "aymar aru"),
    LanguageSpec("az", "", "", "Azerbaijani", "Azərbaycanca"),
    LanguageSpec("az", "IR", "", "Azerbaijani (Iran)", ""),
    LanguageSpec("be", "", "", "Belarusian", "Беларуская мова"),
    LanguageSpec("be", "", "latin", "Belarusian", "Беларуская мова"),
    LanguageSpec("bg", "", "", "Bulgarian", "български"),
    LanguageSpec("bg", "BG", "", "Bulgarian (Bulgaria)", ""),
    LanguageSpec("bn", "", "", "Bengali", "বাংলা"),
    LanguageSpec("bn", "BD", "", "Bengali (Bangladesh)", ""),
    LanguageSpec("bn", "IN", "", "Bengali (India)", ""),
    LanguageSpec("bo", "", "", "Tibetan", "བོད་སྐད་"),
    LanguageSpec("br", "", "", "Breton", "brezhoneg"),
    LanguageSpec("bs", "", "", "Bosnian", "Bosanski"),
    LanguageSpec("bs", "BA", "", "Bosnian (Bosnia/Herzegovina)", ""),
    LanguageSpec("bs", "BS", "", "Bosnian (Bahamas)", ""),
    LanguageSpec("ca", "ES", "valencia", "Catalan (valencia)", ""),
    LanguageSpec("ca", "ES", "", "Catalan (Spain)", ""),
    LanguageSpec("ca", "", "valencia", "Catalan (valencia)", ""),
    LanguageSpec("ca", "", "", "Catalan", ""),
    LanguageSpec("cmn", "", "", "Mandarin", ""),
    LanguageSpec("co", "", "", "Corsican", "corsu"),
    LanguageSpec("cs", "", "", "Czech", "Čeština"),
    LanguageSpec("cs", "CZ", "", "Czech (Czech Republic)", "Čeština (Česká Republika)"),
    LanguageSpec("cy", "", "", "Welsh", "Welsh"),
    LanguageSpec("cy", "GB", "", "Welsh (Great Britain)", "Welsh (Great Britain)"),
    LanguageSpec("cz", "", "", "Unknown language", "Unknown language"),
    LanguageSpec("da", "", "", "Danish", "Dansk"),
    LanguageSpec("da", "DK", "", "Danish (Denmark)", "Dansk (Danmark)"),
    LanguageSpec("de", "", "", "German", "Deutsch"),
    LanguageSpec("de", "AT", "", "German (Austria)", "Deutsch (Österreich)"),
    LanguageSpec("de", "CH", "", "German (Switzerland)", "Deutsch (Schweiz)"),
    LanguageSpec("de", "DE", "", "German (Germany)", "Deutsch (Deutschland)"),
    LanguageSpec("dk", "", "", "Unknown language", "Unknown language"),
    LanguageSpec("dz", "", "", "Dzongkha", "རྫོང་ཁ"),
    LanguageSpec("el", "", "", "Greek", "ελληνικά"),
    LanguageSpec("el", "GR", "", "Greek (Greece)", ""),
    LanguageSpec("en", "", "", "English", "English"),
    LanguageSpec("en", "AU", "", "English (Australia)", "English (Australia)"),
    LanguageSpec("en", "CA", "", "English (Canada)", "English (Canada)"),
    LanguageSpec("en", "GB", "", "English (Great Britain)", "English (Great Britain)"),
    LanguageSpec("en", "US", "", "English (United States)", "English (United States)"),
    LanguageSpec("en", "ZA", "", "English (South Africa)", "English (South Africa)"),
    LanguageSpec("en", "", "boldquot", "English", "English"),
    LanguageSpec("en", "", "quot", "English", "English"),
    LanguageSpec("en", "US", "piglatin", "English", "English"),
    LanguageSpec("eo", "", "", "Esperanto", "Esperanto"),
    LanguageSpec("es", "", "", "Spanish", "Español"),
    LanguageSpec("es", "AR", "", "Spanish (Argentina)", ""),
    LanguageSpec("es", "CL", "", "Spanish (Chile)", ""),
    LanguageSpec("es", "CO", "", "Spanish (Colombia)", ""),
    LanguageSpec("es", "CR", "", "Spanish (Costa Rica)", ""),
    LanguageSpec("es", "DO", "", "Spanish (Dominican Republic)", ""),
    LanguageSpec("es", "EC", "", "Spanish (Ecuador)", ""),
    LanguageSpec("es", "ES", "", "Spanish (Spain)", ""),
    LanguageSpec("es", "GT", "", "Spanish (Guatemala)", ""),
    LanguageSpec("es", "HN", "", "Spanish (Honduras)", ""),
    LanguageSpec("es", "LA", "", "Spanish (Laos)", ""),
    LanguageSpec("es", "MX", "", "Spanish (Mexico)", ""),
    LanguageSpec("es", "NI", "", "Spanish (Nicaragua)", ""),
    LanguageSpec("es", "PA", "", "Spanish (Panama)", ""),
    LanguageSpec("es", "PE", "", "Spanish (Peru)", ""),
    LanguageSpec("es", "PR", "", "Spanish (Puerto Rico)", ""),
    LanguageSpec("es", "SV", "", "Spanish (El Salvador)", ""),
    LanguageSpec("es", "UY", "", "Spanish (Uruguay)", ""),
    LanguageSpec("es", "VE", "", "Spanish (Venezuela)", ""),
    LanguageSpec("et", "", "", "Estonian", "eesti keel"),
    LanguageSpec("et", "EE", "", "Estonian (Estonia)", ""),
    LanguageSpec("et", "ET", "", "Estonian (Ethiopia)", ""),
    LanguageSpec("eu", "", "", "Basque", "euskara"),
    LanguageSpec("eu", "ES", "", "Basque (Spain)", ""),
    LanguageSpec("fa", "", "", "Persian", "فارسى"),
    LanguageSpec("fa", "AF", "", "Persian (Afghanistan)", ""),
    LanguageSpec("fa", "IR", "", "Persian (Iran)", ""),
    LanguageSpec("fi", "", "", "Finnish", "suomi"),
    LanguageSpec("fi", "FI", "", "Finnish (Finland)", ""),
    LanguageSpec("fo", "", "", "Faroese", "Føroyskt"),
    LanguageSpec("fo", "FO", "", "Faeroese (Faroe Islands)", ""),
    LanguageSpec("fr", "", "", "French", "Français"),
    LanguageSpec("fr", "CA", "", "French (Canada)", "Français (Canada)"),
    LanguageSpec("fr", "CH", "", "French (Switzerland)", "Français (Suisse)"),
    LanguageSpec("fr", "FR", "", "French (France)", "Français (France)"),
    LanguageSpec("fr", "LU", "", "French (Luxembourg)", "Français (Luxembourg)"),
    LanguageSpec("fy", "", "", "Frisian", "Frysk"),
    LanguageSpec("ga", "", "", "Irish", "Gaeilge"),
    LanguageSpec("gd", "", "", "Gaelic Scots", "Gàidhlig"),
    LanguageSpec("gl", "", "", "Galician", "Galego"),
    LanguageSpec("gl", "ES", "", "Galician (Spain)", ""),
    LanguageSpec("gn", "", "", "Guarani", "Avañe'ẽ"),
    LanguageSpec("gu", "", "", "Gujarati", "ગુજરાતી"),
    LanguageSpec("gv", "", "", "Manx", "Gaelg"),
    LanguageSpec("ha", "", "", "Hausa", "حَوْسَ"),
    LanguageSpec("he", "", "", "Hebrew", "עברית"),
    LanguageSpec("he", "IL", "", "Hebrew (Israel)", ""),
    LanguageSpec("hi", "", "", "Hindi", "हिन्दी"),
    LanguageSpec("hi", "IN", "", "Hindi (India)", ""),
    LanguageSpec("hr", "", "", "Croatian", "Hrvatski"),
    LanguageSpec("hr", "HR", "", "Croatian (Croatia)", ""),
    LanguageSpec("hu", "", "", "Hungarian", "magyar"),
    LanguageSpec("hu", "HU", "", "Hungarian (Hungary)", ""),
    LanguageSpec("hy", "", "", "Armenian", "Հայերեն"),
    LanguageSpec("ia", "", "", "Interlingua", "Interlingua"),
    LanguageSpec("id", "", "", "Indonesian", "Bahasa Indonesia"),
    LanguageSpec("id", "ID", "", "Indonesian (Indonesia)", ""),
    LanguageSpec("is", "", "", "Icelandic", "Íslenska"),
    LanguageSpec("is", "IS", "", "Icelandic (Iceland)", ""),
    LanguageSpec("it", "", "", "Italian", "Italiano"),
    LanguageSpec("it", "CH", "", "Italian (Switzerland)", ""),
    LanguageSpec("it", "IT", "", "Italian (Italy)", ""),
    LanguageSpec("iu", "", "", "Inuktitut", "ᐃᓄᒃᑎᑐᑦ/inuktitut"),
    LanguageSpec("ja", "", "", "Japanese", "日本語"),
    LanguageSpec("ja", "JP", "", "Japanese (Japan)", ""),
    LanguageSpec("ka", "", "", "Georgian", "ქართული"),
    LanguageSpec("kk", "", "", "Kazakh", "Қазақша"),
    LanguageSpec("kl", "", "", "Kalaallisut", "Kalaallisut"),
    LanguageSpec("km", "", "", "Khmer", "ភាសាខ្មែរ"),
    LanguageSpec("km", "KH", "", "Khmer (Cambodia)", ""),
    LanguageSpec("kn", "", "", "Kannada", "ಕನ್ನಡ"),
    LanguageSpec("ko", "", "", "Korean", "한국어"),
    LanguageSpec("ko", "KR", "", "Korean (Korea)", ""),
    LanguageSpec("ku", "", "", "Kurdish", "Kurdî"),
    LanguageSpec("kw", "", "", "Cornish", "Kernowek"),
    LanguageSpec("ky", "", "", "Kirghiz", ""),
    LanguageSpec("la", "", "", "Latin", "Latina"),
    LanguageSpec("lo", "", "", "Lao", "ລາວ"),
    LanguageSpec("lt", "", "", "Lithuanian", "Lietuvių"),
    LanguageSpec("lt", "LT", "", "Lithuanian (Lithuania)", ""),
    LanguageSpec("lv", "", "", "Latvian", "Latviešu"),
    LanguageSpec("lv", "LV", "", "Latvian (Latvia)", ""),
    LanguageSpec("jbo", "", "", "Lojban", "La .lojban."),
    LanguageSpec("mg", "", "", "Malagasy", "Malagasy"),
    LanguageSpec("mi", "", "", "Maori", "Māori"),
    LanguageSpec("mk", "", "", "Macedonian", "Македонски"),
    LanguageSpec("mk", "MK", "", "Macedonian (Macedonia)", ""),
    LanguageSpec("ml", "", "", "Malayalam", "മലയാളം"),
    LanguageSpec("mn", "", "", "Mongolian", "Монгол"),
    LanguageSpec("mr", "", "", "Marathi", "मराठी"),
    LanguageSpec("ms", "", "", "Malay", "Bahasa Melayu"),
    LanguageSpec("ms", "MY", "", "Malay (Malaysia)", ""),
    LanguageSpec("mt", "", "", "Maltese", "Malti"),
    LanguageSpec("my", "", "", "Burmese", "မြန်မာဘာသာ"),
    LanguageSpec("my", "MM", "", "Burmese (Myanmar)", ""),
    LanguageSpec("nb", "", "", "Norwegian Bokmal", ""),
    LanguageSpec("nb", "NO", "", "Norwegian Bokmål (Norway)", ""),
    LanguageSpec("nds", "", "", "Low German", ""),
    LanguageSpec("ne", "", "", "Nepali", ""),
    LanguageSpec("nl", "", "", "Dutch", "Nederlands"),
    LanguageSpec("nl", "BE", "", "Dutch (Belgium)", ""),
    LanguageSpec("nl", "NL", "", "Dutch (Netherlands)", ""),
    LanguageSpec("nn", "", "", "Norwegian Nynorsk", "Norsk nynorsk"),
    LanguageSpec("nn", "NO", "", "Norwegian Nynorsk (Norway)", ""),
    LanguageSpec("no", "", "", "Norwegian", "Norsk bokmål"),
    LanguageSpec("no", "NO", "", "Norwegian (Norway)", ""),
    LanguageSpec("no", "NY", "", "Norwegian (NY)", ""),
    LanguageSpec("nr", "", "", "Ndebele, South", ""),
    LanguageSpec("oc", "", "", "Occitan post 1500", "Occitan"),
    LanguageSpec("om", "", "", "Oromo", "Oromoo"),
    LanguageSpec("or", "", "", "Oriya", "ଓଡ଼ିଆ"),
    LanguageSpec("pa", "", "", "Punjabi", "ਪੰਜਾਬੀ"),
    LanguageSpec("pl", "", "", "Polish", "Polski"),
    LanguageSpec("pl", "PL", "", "Polish (Poland)", ""),
    LanguageSpec("ps", "", "", "Pashto", "پښتو"),
    LanguageSpec("pt", "", "", "Portuguese", "Português"),
    LanguageSpec("pt", "BR", "", "Portuguese (Brazil)", ""),
    LanguageSpec("pt", "PT", "", "Portuguese (Portugal)", ""),
    LanguageSpec("qu", "", "", "Quechua", "Runa Simi"),
    LanguageSpec("rm", "", "", "Rhaeto-Romance", "Rumantsch"),
    LanguageSpec("ro", "", "", "Romanian", "Română"),
    LanguageSpec("ro", "RO", "", "Romanian (Romania)", ""),
    LanguageSpec("ru", "", "", "Russian", "Русский"),
    LanguageSpec("ru", "RU", "", "Russian (Russia", ""),
    LanguageSpec("rw", "", "", "Kinyarwanda", "Kinyarwanda"),
    LanguageSpec("sa", "", "", "Sanskrit", ""),
    LanguageSpec("sd", "", "", "Sindhi", ""),
    LanguageSpec("se", "", "", "Sami", "Sámegiella"),
    LanguageSpec("se", "NO", "", "Sami (Norway)", ""),
    LanguageSpec("si", "", "", "Sinhalese", ""),
    LanguageSpec("sk", "", "", "Slovak", "Slovenčina"),
    LanguageSpec("sk", "SK", "", "Slovak (Slovakia)", ""),
    LanguageSpec("sl", "", "", "Slovenian", "Slovenščina"),
    LanguageSpec("sl", "SI", "", "Slovenian (Slovenia)", ""),
    LanguageSpec("sl", "SL", "", "Slovenian (Sierra Leone)", ""),
    LanguageSpec("sm", "", "", "Samoan", ""),
    LanguageSpec("so", "", "", "Somali", ""),
    LanguageSpec("sp", "", "", "Unknown language", ""),
    LanguageSpec("sq", "", "", "Albanian", "Shqip"),
    LanguageSpec("sq", "AL", "", "Albanian (Albania)", ""),
    LanguageSpec("sr", "", "", "Serbian", "Српски / srpski"),
    LanguageSpec("sr", "YU", "", "Serbian (Yugoslavia)", ""),
    LanguageSpec("sr", "", "ije", "Serbian", ""),
    LanguageSpec("sr", "", "latin", "Serbian", ""),
    LanguageSpec("sr", "", "Latn", "Serbian", ""),
    LanguageSpec("ss", "", "", "Swati", ""),
    LanguageSpec("st", "", "", "Sotho", ""),
    LanguageSpec("sv", "", "", "Swedish", "Svenska"),
    LanguageSpec("sv", "SE", "", "Swedish (Sweden)", ""),
    LanguageSpec("sv", "SV", "", "Swedish (El Salvador)", ""),
    LanguageSpec("sw", "", "", "Swahili", ""),
    LanguageSpec("ta", "", "", "Tamil", ""),
    LanguageSpec("te", "", "", "Telugu", ""),
    LanguageSpec("tg", "", "", "Tajik", ""),
    LanguageSpec("th", "", "", "Thai", "ไทย"),
    LanguageSpec("th", "TH", "", "Thai (Thailand)", ""),
    LanguageSpec("ti", "", "", "Tigrinya", ""),
    LanguageSpec("tk", "", "", "Turkmen", ""),
    LanguageSpec("tl", "", "", "Tagalog", ""),
    LanguageSpec("to", "", "", "Tonga", ""),
    LanguageSpec("tr", "", "", "Turkish", "Türkçe"),
    LanguageSpec("tr", "TR", "", "Turkish (Turkey)", ""),
    LanguageSpec("ts", "", "", "Tsonga", ""),
    LanguageSpec("tt", "", "", "Tatar", ""),
    LanguageSpec("ug", "", "", "Uighur", ""),
    LanguageSpec("uk", "", "", "Ukrainian", "Українська"),
    LanguageSpec("uk", "UA", "", "Ukrainian (Ukraine)", ""),
    LanguageSpec("ur", "", "", "Urdu", ""),
    LanguageSpec("ur", "PK", "", "Urdu (Pakistan)", ""),
    LanguageSpec("uz", "", "", "Uzbek", ""),
    LanguageSpec("uz", "", "cyrillic", "Uzbek", ""),
    LanguageSpec("vi", "", "", "Vietnamese", "Tiếng Việt"),
    LanguageSpec("vi", "VN", "", "Vietnamese (Vietnam)", ""),
    LanguageSpec("wa", "", "", "Walloon", ""),
    LanguageSpec("wo", "", "", "Wolof", ""),
    LanguageSpec("xh", "", "", "Xhosa", ""),
    LanguageSpec("yi", "", "", "Yiddish", "ייִדיש"),
    LanguageSpec("yo", "", "", "Yoruba", ""),
    LanguageSpec("zh", "", "", "Chinese", "中文"),
    LanguageSpec("zh", "CN", "", "Chinese (simplified)", ""),
    LanguageSpec("zh", "HK", "", "Chinese (Hong Kong)", ""),
    LanguageSpec("zh", "TW", "", "Chinese (traditional)", ""),
    LanguageSpec("zu", "", "", "Zulu", ""),
)
# fmt: on

# Lower-cased alias -> locale spec, taken from the usual locale.alias file.
LANGUAGE_ALIASES: MappingProxyType[str, str] = MappingProxyType({
    "bokmal": "nb_NO.ISO-8859-1",
    "bokmål": "nb_NO.ISO-8859-1",
    "catalan": "ca_ES.ISO-8859-1",
    "croatian": "hr_HR.ISO-8859-2",
    "czech": "cs_CZ.ISO-8859-2",
    "danish": "da_DK.ISO-8859-1",
    "dansk": "da_DK.ISO-8859-1",
    "deutsch": "de_DE.ISO-8859-1",
    "dutch": "nl_NL.ISO-8859-1",
    "eesti": "et_EE.ISO-8859-1",
    "estonian": "et_EE.ISO-8859-1",
    "finnish": "fi_FI.ISO-8859-1",
    "français": "fr_FR.ISO-8859-1",
    "french": "fr_FR.ISO-8859-1",
    "galego": "gl_ES.ISO-8859-1",
    "galician": "gl_ES.ISO-8859-1",
    "german": "de_DE.ISO-8859-1",
    "greek": "el_GR.ISO-8859-7",
    "hebrew": "he_IL.ISO-8859-8",
    "hrvatski": "hr_HR.ISO-8859-2",
    "hungarian": "hu_HU.ISO-8859-2",
    "icelandic": "is_IS.ISO-8859-1",
    "italian": "it_IT.ISO-8859-1",
    "ja_JP": "ja_JP.eucJP",
    "ja_JP.ujis": "ja_JP.eucJP",
    "japanese": "ja_JP.eucJP",
    "japanese.euc": "ja_JP.eucJP",
    "japanese.sjis": "ja_JP.SJIS",
    "ko_KR": "ko_KR.eucKR",
    "korean": "ko_KR.eucKR",
    "korean.euc": "ko_KR.eucKR",
    "lithuanian": "lt_LT.ISO-8859-13",
    "no_NO": "nb_NO.ISO-8859-1",
    "no_NO.ISO-8859-1": "nb_NO.ISO-8859-1",
    "norwegian": "nb_NO.ISO-8859-1",
    "nynorsk": "nn_NO.ISO-8859-1",
    "polish": "pl_PL.ISO-8859-2",
    "portuguese": "pt_PT.ISO-8859-1",
    "romanian": "ro_RO.ISO-8859-2",
    "russian": "ru_RU.ISO-8859-5",
    "slovak": "sk_SK.ISO-8859-2",
    "slovene": "sl_SI.ISO-8859-2",
    "slovenian": "sl_SI.ISO-8859-2",
    "spanish": "es_ES.ISO-8859-1",
    "swedish": "sv_SE.ISO-8859-1",
    "thai": "th_TH.TIS-620",
    "turkish": "tr_TR.ISO-8859-9",
})
