# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the TaskGlitch dashboard.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "TaskGlitch",
        "app.welcome": "Welcome, {name}.",
        "app.loading": "Loading tasks...",
        "app.load_error": "Could not load tasks ({error}). Showing sample data instead.",

        # Metrics bar
        "metrics.total_revenue": "Total Revenue",
        "metrics.time_efficiency": "Time Efficiency",
        "metrics.revenue_per_hour": "Revenue / Hour",
        "metrics.average_roi": "Average ROI",
        "metrics.grade": "Grade",

        # Filters
        "filter.search": "Search...",
        "filter.all": "All",
        "filter.status": "Status",
        "filter.priority": "Priority",

        # Task table
        "tasks.title": "Tasks",
        "tasks.add": "Add Task",
        "tasks.header_title": "Title",
        "tasks.header_revenue": "Revenue",
        "tasks.header_time": "Time",
        "tasks.header_roi": "ROI",
        "tasks.header_priority": "Priority",
        "tasks.header_status": "Status",
        "tasks.header_actions": "Actions",
        "tasks.edit": "Edit",
        "tasks.delete": "Delete",
        "tasks.empty": "No tasks match the current filters.",

        # Task form
        "form.add_title": "Add Task",
        "form.edit_title": "Edit Task",
        "form.title": "Title",
        "form.revenue": "Revenue",
        "form.time_taken": "Time taken (h)",
        "form.priority": "Priority",
        "form.status": "Status",
        "form.notes": "Notes",
        "form.error_title_required": "Title is required.",
        "form.error_title_duplicate": "A task with this title already exists.",

        # Details dialog
        "details.title": "Task Details",
        "details.created": "Created",
        "details.completed": "Completed",
        "details.roi": "ROI",
        "details.save": "Save",

        # Undo bar
        "undo.message": "Task deleted",
        "undo.undo": "Undo",
        "undo.dismiss": "Dismiss",

        # Charts
        "charts.title": "Breakdown",
        "charts.revenue_by_priority": "Revenue by priority",
        "charts.count_by_status": "Tasks by status",

        # Activity
        "activity.title": "Activity",
        "activity.empty": "No activity yet.",

        # Export
        "export.button": "Export CSV",
        "export.dialog_title": "Export Tasks",
        "export.filter": "CSV Files (*.csv)",
        "export.success": "Exported {count} task(s) to {path}",
        "export.error": "Export failed: {error}",

        # Common
        "error": "Error",
        "action.cancel": "Cancel",
        "action.ok": "OK",
    },
    "de": {
        # Application
        "app.name": "TaskGlitch",
        "app.welcome": "Willkommen, {name}.",
        "app.loading": "Aufgaben werden geladen...",
        "app.load_error": "Aufgaben konnten nicht geladen werden ({error}). Beispieldaten werden angezeigt.",

        # Metrics bar
        "metrics.total_revenue": "Gesamtumsatz",
        "metrics.time_efficiency": "Zeiteffizienz",
        "metrics.revenue_per_hour": "Umsatz / Stunde",
        "metrics.average_roi": "Durchschn. ROI",
        "metrics.grade": "Bewertung",

        # Filters
        "filter.search": "Suchen...",
        "filter.all": "Alle",
        "filter.status": "Status",
        "filter.priority": "Priorität",

        # Task table
        "tasks.title": "Aufgaben",
        "tasks.add": "Aufgabe hinzufügen",
        "tasks.header_title": "Titel",
        "tasks.header_revenue": "Umsatz",
        "tasks.header_time": "Zeit",
        "tasks.header_roi": "ROI",
        "tasks.header_priority": "Priorität",
        "tasks.header_status": "Status",
        "tasks.header_actions": "Aktionen",
        "tasks.edit": "Bearbeiten",
        "tasks.delete": "Löschen",
        "tasks.empty": "Keine Aufgaben entsprechen den Filtern.",

        # Task form
        "form.add_title": "Aufgabe hinzufügen",
        "form.edit_title": "Aufgabe bearbeiten",
        "form.title": "Titel",
        "form.revenue": "Umsatz",
        "form.time_taken": "Zeitaufwand (h)",
        "form.priority": "Priorität",
        "form.status": "Status",
        "form.notes": "Notizen",
        "form.error_title_required": "Titel ist erforderlich.",
        "form.error_title_duplicate": "Eine Aufgabe mit diesem Titel existiert bereits.",

        # Details dialog
        "details.title": "Aufgabendetails",
        "details.created": "Erstellt",
        "details.completed": "Abgeschlossen",
        "details.roi": "ROI",
        "details.save": "Speichern",

        # Undo bar
        "undo.message": "Aufgabe gelöscht",
        "undo.undo": "Rückgängig",
        "undo.dismiss": "Schließen",

        # Charts
        "charts.title": "Aufschlüsselung",
        "charts.revenue_by_priority": "Umsatz nach Priorität",
        "charts.count_by_status": "Aufgaben nach Status",

        # Activity
        "activity.title": "Aktivität",
        "activity.empty": "Noch keine Aktivität.",

        # Export
        "export.button": "CSV exportieren",
        "export.dialog_title": "Aufgaben exportieren",
        "export.filter": "CSV-Dateien (*.csv)",
        "export.success": "{count} Aufgabe(n) nach {path} exportiert",
        "export.error": "Export fehlgeschlagen: {error}",

        # Common
        "error": "Fehler",
        "action.cancel": "Abbrechen",
        "action.ok": "OK",
    },
}
