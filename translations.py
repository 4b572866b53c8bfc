# translations.py
"""
Localization table for the tanker loading log.

Static mapping (language, key) -> display string for Arabic, French and
English. Lookups never fail: an unknown language or key resolves to the key.
"""

from typing import Dict

SUPPORTED_LANGUAGES = ("ar", "fr", "en")
DEFAULT_LANGUAGE = "ar"
RTL_LANGUAGES = frozenset({"ar"})

LANGUAGE_NAMES = {
    "ar": "العربية",
    "fr": "Français",
    "en": "English",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "ar": {
        # Header
        "header.title": "وضعية الصهاريج",
        "header.subtitle": "سجل تحميل الصهاريج اليومي",
        "header.userId": "المستخدم",
        "header.logout": "تسجيل الخروج",

        # Login / operator
        "login.title": "تسجيل الدخول",
        "login.jobCard": "رقم بطاقة العمل",
        "login.name": "الاسم",
        "login.login": "دخول",
        "login.fillAllFields": "يرجى ملء جميع الحقول",

        # Form
        "form.title": "تسجيل حركة صهريج",
        "form.serialNumber": "الرقم",
        "form.tankerNumber": "رقم الصهريج",
        "form.entryTime": "وقت الدخول",
        "form.exitTime": "وقت الخروج",
        "form.bcNumber": "رقم BC",
        "form.orderedQuantity": "الكمية المطلوبة",
        "form.loadedQuantity": "الكمية المحملة",
        "form.oldIndex": "المؤشر القديم",
        "form.currentIndex": "المؤشر الحالي",
        "form.destination": "الوجهة",
        "form.save": "حفظ",
        "form.saving": "جاري الحفظ...",
        "form.success": "تم حفظ السجل بنجاح",
        "form.error": "حدث خطأ أثناء الحفظ",
        "form.required": "هذا الحقل مطلوب",
        "form.invalidNumber": "يرجى إدخال رقم صحيح",
        "form.negativeNumber": "يجب أن تكون القيمة موجبة",
        "form.invalidTime": "صيغة الوقت غير صحيحة (HH:MM)",

        # Dashboard
        "dashboard.serialNum": "N°",
        "dashboard.tankerNum": "رقم الصهريج",
        "dashboard.entry": "وقت الدخول",
        "dashboard.exit": "وقت الخروج",
        "dashboard.bcNum": "رقم BC",
        "dashboard.ordered": "الكمية المطلوبة",
        "dashboard.loaded": "الكمية المحملة",
        "dashboard.oldIdx": "المؤشر القديم",
        "dashboard.currentIdx": "المؤشر الحالي",
        "dashboard.destination": "الوجهة",
        "dashboard.totalLoaded": "إجمالي الكمية المحملة",
        "dashboard.totalOrdered": "إجمالي الكمية المطلوبة",
        "dashboard.tankerCount": "عدد الصهاريج",
        "dashboard.noRecords": "لا توجد سجلات لهذا التاريخ",
        "dashboard.delete": "حذف",
        "dashboard.deleted": "تم حذف السجل",
        "dashboard.search": "بحث",
        "dashboard.date": "التاريخ",
        "dashboard.hourlyChart": "تحليل الكميات بالساعة",
        "dashboard.trendChart": "اتجاه التحميل",
        "dashboard.exportData": "تصدير البيانات",

        # Export
        "export.title": "تقرير وضعية الصهاريج",
        "export.selectFormat": "صيغة التصدير",
        "export.selectLanguage": "لغة التقرير",
        "export.selectDateRange": "الفترة الزمنية",
        "export.startDate": "من تاريخ",
        "export.endDate": "إلى تاريخ",
        "export.selectRecords": "اختيار السجلات",
        "export.allRecords": "جميع السجلات",
        "export.customRecords": "تحديد يدوي",
        "export.exportBtn": "تصدير",
        "export.cancel": "إلغاء",
        "export.success": "تم التصدير بنجاح",
        "export.error": "فشل التصدير",

        # Footer
        "footer.organization": "مستودع الوقود",
        "footer.department": "مصلحة التعبئة",
        "footer.responsible": "المسؤول",
        "footer.name": "رئيس المستودع",
        "footer.version": "الإصدار",
        "footer.rights": "جميع الحقوق محفوظة",

        # Errors
        "error.unauthenticated": "يجب تسجيل الدخول أولا",
        "error.persistence": "تعذر حفظ البيانات",

        # Languages
        "lang.arabic": "العربية",
        "lang.french": "الفرنسية",
        "lang.english": "الإنجليزية",
    },
    "fr": {
        "header.title": "Situation Citerne",
        "header.subtitle": "Registre journalier de chargement des citernes",
        "header.userId": "Utilisateur",
        "header.logout": "Déconnexion",

        "login.title": "Connexion",
        "login.jobCard": "Numéro de carte",
        "login.name": "Nom",
        "login.login": "Se connecter",
        "login.fillAllFields": "Veuillez remplir tous les champs",

        "form.title": "Enregistrer un mouvement de citerne",
        "form.serialNumber": "N°",
        "form.tankerNumber": "Numéros citernes",
        "form.entryTime": "Heure d'entrée",
        "form.exitTime": "Heure de sortie",
        "form.bcNumber": "Numéro B C",
        "form.orderedQuantity": "Quantité commandée",
        "form.loadedQuantity": "Quantité chargée",
        "form.oldIndex": "Ancien index",
        "form.currentIndex": "Index",
        "form.destination": "Destination",
        "form.save": "Enregistrer",
        "form.saving": "Enregistrement...",
        "form.success": "Enregistrement effectué",
        "form.error": "Erreur lors de l'enregistrement",
        "form.required": "Champ obligatoire",
        "form.invalidNumber": "Veuillez saisir un nombre valide",
        "form.negativeNumber": "La valeur doit être positive",
        "form.invalidTime": "Format d'heure invalide (HH:MM)",

        "dashboard.serialNum": "N°",
        "dashboard.tankerNum": "N° Citerne",
        "dashboard.entry": "Entrée",
        "dashboard.exit": "Sortie",
        "dashboard.bcNum": "N° BC",
        "dashboard.ordered": "Qté commandée",
        "dashboard.loaded": "Qté chargée",
        "dashboard.oldIdx": "Ancien index",
        "dashboard.currentIdx": "Index",
        "dashboard.destination": "Destination",
        "dashboard.totalLoaded": "Total chargé",
        "dashboard.totalOrdered": "Total commandé",
        "dashboard.tankerCount": "Nombre de citernes",
        "dashboard.noRecords": "Aucun enregistrement pour cette date",
        "dashboard.delete": "Supprimer",
        "dashboard.deleted": "Enregistrement supprimé",
        "dashboard.search": "Recherche",
        "dashboard.date": "Date",
        "dashboard.hourlyChart": "Quantités par heure",
        "dashboard.trendChart": "Tendance de chargement",
        "dashboard.exportData": "Exporter les données",

        "export.title": "Rapport Situation Citerne",
        "export.selectFormat": "Format d'export",
        "export.selectLanguage": "Langue du rapport",
        "export.selectDateRange": "Période",
        "export.startDate": "Date de début",
        "export.endDate": "Date de fin",
        "export.selectRecords": "Sélection des enregistrements",
        "export.allRecords": "Tous les enregistrements",
        "export.customRecords": "Sélection personnalisée",
        "export.exportBtn": "Exporter",
        "export.cancel": "Annuler",
        "export.success": "Export réussi",
        "export.error": "Échec de l'export",

        "footer.organization": "Dépôt Carburant",
        "footer.department": "Service Chargement",
        "footer.responsible": "Le Responsable",
        "footer.name": "Chef de Dépôt",
        "footer.version": "Version",
        "footer.rights": "Tous droits réservés",

        "error.unauthenticated": "Veuillez vous connecter",
        "error.persistence": "Impossible d'enregistrer les données",

        "lang.arabic": "Arabe",
        "lang.french": "Français",
        "lang.english": "Anglais",
    },
    "en": {
        "header.title": "Tanker Situation",
        "header.subtitle": "Daily tanker loading log",
        "header.userId": "User",
        "header.logout": "Log out",

        "login.title": "Sign in",
        "login.jobCard": "Job card number",
        "login.name": "Name",
        "login.login": "Sign in",
        "login.fillAllFields": "Please fill in all fields",

        "form.title": "Record a tanker movement",
        "form.serialNumber": "No.",
        "form.tankerNumber": "Tanker number",
        "form.entryTime": "Entry time",
        "form.exitTime": "Exit time",
        "form.bcNumber": "BC number",
        "form.orderedQuantity": "Ordered quantity",
        "form.loadedQuantity": "Loaded quantity",
        "form.oldIndex": "Old index",
        "form.currentIndex": "Current index",
        "form.destination": "Destination",
        "form.save": "Save",
        "form.saving": "Saving...",
        "form.success": "Record saved",
        "form.error": "Could not save the record",
        "form.required": "This field is required",
        "form.invalidNumber": "Please enter a valid number",
        "form.negativeNumber": "Value must not be negative",
        "form.invalidTime": "Invalid time format (HH:MM)",

        "dashboard.serialNum": "No.",
        "dashboard.tankerNum": "Tanker No.",
        "dashboard.entry": "Entry",
        "dashboard.exit": "Exit",
        "dashboard.bcNum": "BC No.",
        "dashboard.ordered": "Ordered",
        "dashboard.loaded": "Loaded",
        "dashboard.oldIdx": "Old index",
        "dashboard.currentIdx": "Current index",
        "dashboard.destination": "Destination",
        "dashboard.totalLoaded": "Total loaded",
        "dashboard.totalOrdered": "Total ordered",
        "dashboard.tankerCount": "Tanker count",
        "dashboard.noRecords": "No records for this date",
        "dashboard.delete": "Delete",
        "dashboard.deleted": "Record deleted",
        "dashboard.search": "Search",
        "dashboard.date": "Date",
        "dashboard.hourlyChart": "Quantities by hour",
        "dashboard.trendChart": "Loading trend",
        "dashboard.exportData": "Export data",

        "export.title": "Tanker Situation Report",
        "export.selectFormat": "Export format",
        "export.selectLanguage": "Report language",
        "export.selectDateRange": "Date range",
        "export.startDate": "Start date",
        "export.endDate": "End date",
        "export.selectRecords": "Record selection",
        "export.allRecords": "All records",
        "export.customRecords": "Custom selection",
        "export.exportBtn": "Export",
        "export.cancel": "Cancel",
        "export.success": "Export completed",
        "export.error": "Export failed",

        "footer.organization": "Fuel Depot",
        "footer.department": "Loading Department",
        "footer.responsible": "Responsible",
        "footer.name": "Depot Manager",
        "footer.version": "Version",
        "footer.rights": "All rights reserved",

        "error.unauthenticated": "Please sign in first",
        "error.persistence": "Could not save data",

        "lang.arabic": "Arabic",
        "lang.french": "French",
        "lang.english": "English",
    },
}


def resolve(language: str, key: str) -> str:
    """Display string for ``key`` in ``language``; the key itself when unmapped"""
    return TRANSLATIONS.get(language, {}).get(key, key)


def is_rtl(language: str) -> bool:
    return language in RTL_LANGUAGES


def translator(language: str):
    """Bind ``resolve`` to one language: t = translator('fr'); t('form.save')"""
    def t(key: str) -> str:
        return resolve(language, key)
    return t
