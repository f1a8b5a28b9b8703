STATUS_MESSAGE_TTL = 2.0
DATE_FORMAT_HINT = "YYYY-MM-DD"

LANG_PACK = {
    "en": {
        "APP_TITLE": "TaskTerm",
        "LIST_LABEL": " Tasks ",
        "EMPTY_LIST": "No tasks. Press \"a\" to add one.",
        "EMPTY_VIEW": "No tasks match the current filter/search.",
        "INSTRUCTIONS": 'Use arrow keys to select | "a" add | "e" edit | "c" complete | "d" delete | "f" filter | "s" sort | "/" search | "h" help',
        "STATUS_LINE": "Tasks: {total} | Completed: {completed} | Filter: {filter} | Sort: {sort}",
        "STATUS_SEARCH": "Search: {term}",
        "HELP_TITLE": " Help ",
        "HELP_BODY": (
            "Commands:\n"
            '"a" - Add task\n'
            '"e" - Edit selected task\n'
            '"c" - Toggle complete\n'
            '"d" - Delete task\n'
            '"f" - Toggle filter (all/completed/uncompleted)\n'
            '"s" - Change sort (default/priority/dueDate/created)\n'
            '"p" - Set priority (high/medium/low)\n'
            '"u" - Edit due date for task\n'
            '"t" - Add tags\n'
            '"/" - Search tasks\n'
            '"h" - Toggle this help\n'
            '"q" - Quit'
        ),
        "DIALOG_ADD": " Add Task ",
        "DIALOG_EDIT": " Edit Task ",
        "DIALOG_DUE": " Set Due Date (YYYY-MM-DD) ",
        "DIALOG_TAGS": " Add Tags (comma-separated) ",
        "DIALOG_SEARCH": " Search Tasks ",
        "DIALOG_HINT": "Enter - save | Esc - cancel",
        "MSG_ADDED": "Task added!",
        "MSG_COMPLETED": "Task completed!",
        "MSG_UNCOMPLETED": "Task marked incomplete",
        "MSG_DELETED": "Task deleted!",
        "MSG_UPDATED": "Task updated!",
        "MSG_PRIORITY": "Priority set to: {priority}",
        "MSG_DUE_UPDATED": "Due date updated!",
        "MSG_DUE_CLEARED": "Due date cleared!",
        "MSG_DUE_INVALID": "Invalid date format! Use YYYY-MM-DD",
        "MSG_TAGS_UPDATED": "Tags updated!",
        "MSG_FILTER": "Filter: {mode}",
        "MSG_SORT": "Sort: {mode}",
        "MSG_EMPTY_DESCRIPTION": "Description cannot be empty",
        "MSG_NOT_FOUND": "Task no longer exists",
        "MSG_SAVE_FAILED": "Could not save tasks: {error}",
        "MSG_SEARCH_CLEARED": "Search cleared",
        "CLI_ADDED": "Added [{id}] {description}",
        "CLI_TOGGLED_DONE": "Completed [{id}] {description}",
        "CLI_TOGGLED_OPEN": "Reopened [{id}] {description}",
        "CLI_DELETED": "Deleted [{id}] {description}",
        "CLI_UPDATED": "Updated [{id}] {description}",
        "CLI_PRIORITY": "Priority of [{id}] set to {priority}",
        "CLI_NO_TASKS": "(no tasks)",
        "CLI_RESET_DONE": "Store reset: {path}",
        "CLI_RESET_CONFIRM": "Erase all tasks in {path}?",
        "CLI_ABORTED": "Aborted.",
        "ERR_LANG_UNKNOWN": "Unknown language {value!r}. Available: {choices}.",
        "ERR_NOT_FOUND": "Task {id} not found.",
        "ERR_EMPTY_DESCRIPTION": "Description cannot be empty.",
        "ERR_DUE_INVALID": "Invalid date format: {value!r}. Use YYYY-MM-DD.",
        "ERR_CORRUPT_STORE": "Cannot read task store {path}: {reason}",
        "ERR_CORRUPT_HINT": "Run `taskterm reset` to back it up and start with an empty list.",
        "PROMPT_REINIT": "Back up the unreadable file and start with an empty list?",
        "CORRUPT_BACKED_UP": "Unreadable store moved to {path}",
    },
    "ru": {
        "LIST_LABEL": " Задачи ",
        "EMPTY_LIST": "Задач нет. Нажмите \"a\", чтобы добавить.",
        "EMPTY_VIEW": "Нет задач под текущий фильтр/поиск.",
        "INSTRUCTIONS": 'Стрелки - выбор | "a" добавить | "e" правка | "c" выполнено | "d" удалить | "f" фильтр | "s" сортировка | "/" поиск | "h" помощь',
        "STATUS_LINE": "Задач: {total} | Выполнено: {completed} | Фильтр: {filter} | Сортировка: {sort}",
        "STATUS_SEARCH": "Поиск: {term}",
        "HELP_TITLE": " Помощь ",
        "DIALOG_ADD": " Новая задача ",
        "DIALOG_EDIT": " Правка задачи ",
        "DIALOG_DUE": " Срок (YYYY-MM-DD) ",
        "DIALOG_TAGS": " Теги (через запятую) ",
        "DIALOG_SEARCH": " Поиск ",
        "DIALOG_HINT": "Enter - сохранить | Esc - отмена",
        "MSG_ADDED": "Задача добавлена!",
        "MSG_COMPLETED": "Задача выполнена!",
        "MSG_UNCOMPLETED": "Задача снова открыта",
        "MSG_DELETED": "Задача удалена!",
        "MSG_UPDATED": "Задача обновлена!",
        "MSG_PRIORITY": "Приоритет: {priority}",
        "MSG_DUE_UPDATED": "Срок обновлён!",
        "MSG_DUE_CLEARED": "Срок снят!",
        "MSG_DUE_INVALID": "Неверный формат даты! Используйте YYYY-MM-DD",
        "MSG_TAGS_UPDATED": "Теги обновлены!",
        "MSG_FILTER": "Фильтр: {mode}",
        "MSG_SORT": "Сортировка: {mode}",
        "MSG_EMPTY_DESCRIPTION": "Описание не может быть пустым",
        "MSG_NOT_FOUND": "Задача больше не существует",
        "MSG_SAVE_FAILED": "Не удалось сохранить задачи: {error}",
        "MSG_SEARCH_CLEARED": "Поиск сброшен",
        "ERR_NOT_FOUND": "Задача {id} не найдена.",
        "ERR_LANG_UNKNOWN": "Неизвестный язык {value!r}. Доступны: {choices}.",
        "ERR_CORRUPT_STORE": "Не удалось прочитать хранилище {path}: {reason}",
    },
}
