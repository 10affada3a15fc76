"""Interactive CLI application."""
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from jp_tutor.cache import clear_cache, get_cache_info
from jp_tutor.chat import ChatService
from jp_tutor.dashboard import get_accuracy_color, get_session_summary
from jp_tutor.errors import InvalidConfiguration
from jp_tutor.kana import to_romaji
from jp_tutor.kanji_api import KanjiClient
from jp_tutor.log import setup_logging
from jp_tutor.models import JLPT_LEVELS, KANJI_GRADES, Question, QuizMode, QuizType
from jp_tutor.questions import get_answer_label, get_quiz_mode_label
from jp_tutor.quiz import (
    QuizSession, configure, load_deck, next_question, reset_stats, restart, submit_answer,
)
from jp_tutor.settings import get_settings, has_chat_config

console = Console()

EXIT_WORDS = ("q", "menu")
MAX_READINGS_SHOWN = 12
TYPE_COLORS = {QuizType.HIRAGANA: "blue", QuizType.KATAKANA: "green", QuizType.KANJI: "red"}


class SessionExitRequested(Exception):
    """Raised when the user leaves a drill to go back to the menu."""


def session_prompt(prompt: str, **kwargs) -> str:
    value = Prompt.ask(prompt, **kwargs)
    if value.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return value


def show_welcome():
    console.print(Panel(
        "[bold]日本語 Quiz[/bold]\n[dim]Hiragana · Katakana · Kanji[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu(session: QuizSession):
    config = session.config
    level = ""
    if config.jlpt_level:
        level = f" · JLPT N{config.jlpt_level}"
    elif config.kanji_grade:
        level = f" · Grade {config.kanji_grade}"
    console.print(
        f"\n[dim]{config.quiz_type.value.title()} · "
        f"{get_quiz_mode_label(config.quiz_mode, config.quiz_type)}{level}[/dim]"
    )
    console.print("[bold]Commands:[/bold]")
    commands = [
        ("quiz", "Continue the current deck"),
        ("settings", "Quiz type, mode and level"),
        ("stats", "Score and progress"),
        ("reset", "Reset score"),
        ("restart", "Start a new quiz"),
        ("chat", "Ask the vocabulary assistant"),
        ("cache", "Kanji cache info"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def _reading_list(title: str, readings: tuple[str, ...], limit: int | None = MAX_READINGS_SHOWN) -> str:
    shown = readings if limit is None else readings[:limit]
    line = "  ".join(f"{r} [dim]{to_romaji(r)}[/dim]" for r in shown)
    if limit is not None and len(readings) > limit:
        line += f"  [dim]+{len(readings) - limit}[/dim]"
    return f"[bold]{title} ({len(readings)})[/bold]\n{line}"


def show_question(question: Question, session: QuizSession):
    used, available = session.deck.progress()
    color = TYPE_COLORS.get(question.quiz_type, "cyan")
    console.print(Panel(
        f"[bold {color}]{question.prompt}[/bold {color}]",
        title=f"{used}/{available}", border_style=color,
    ))
    config = session.config
    if config.quiz_type == QuizType.KANJI and config.quiz_mode == QuizMode.CHARACTER_TO_ROMAJI:
        parts = []
        if question.name_readings:
            parts.append(_reading_list("Name Readings", question.name_readings))
        if question.on_readings:
            parts.append(_reading_list("On Readings", question.on_readings, limit=None))
        if question.kun_readings:
            parts.append(_reading_list("Kun Readings", question.kun_readings))
        if parts:
            console.print("\n".join(parts))


def show_completion(session: QuizSession):
    summary = get_session_summary(session)
    color = get_accuracy_color(summary["accuracy"])
    console.print(Panel(
        f"Congratulations! You've mastered all {summary['available']} characters "
        f"in this {session.config.quiz_type.value} set!\n\n"
        f"{summary['correct']} correct out of {summary['total']} questions\n"
        f"[{color}]{summary['accuracy']}% accuracy - {summary['label']}[/{color}]",
        title="Quiz Completed!", border_style="green",
    ))
    console.print("[dim]Use 'restart' to start a new quiz.[/dim]")


def run_quiz_session(session: QuizSession) -> None:
    if session.current is not None and not session.answered:
        question = session.current
    else:
        question = next_question(session)
    while question is not None:
        show_question(question, session)
        label = get_answer_label(session.config.quiz_mode, session.config.quiz_type)
        result = None
        while result is None:
            answer = session_prompt(f"Type the [bold]{label}[/bold] [dim](q to leave)[/dim]")
            result = submit_answer(session, answer)
        style = "green" if result.correct else "red"
        console.print(f"[{style}]{result.feedback}[/{style}]\n")
        question = next_question(session)
    if session.completed:
        show_completion(session)
    else:
        console.print("[yellow]No characters available for this configuration.[/yellow]")


def _load(session: QuizSession, client: KanjiClient, workers: int) -> None:
    with console.status("Loading characters..."):
        load_deck(session, client, workers)
    console.print(f"[green]{len(session.deck.available)} characters ready.[/green]")


def cmd_settings(session: QuizSession, client: KanjiClient, workers: int):
    quiz_type = Prompt.ask(
        "Quiz type", choices=[t.value for t in QuizType], default=session.config.quiz_type.value,
    )
    modes = [QuizMode.CHARACTER_TO_ROMAJI, QuizMode.ROMAJI_TO_CHARACTER]
    if quiz_type == QuizType.KANJI.value:
        modes.append(QuizMode.MEANING_TO_CHARACTER)
    for i, mode in enumerate(modes, 1):
        console.print(f"  [cyan]{i}[/cyan]) {get_quiz_mode_label(mode, QuizType(quiz_type))}")
    mode_index = int(Prompt.ask("Quiz mode", choices=[str(i) for i in range(1, len(modes) + 1)], default="1"))
    jlpt_level = kanji_grade = None
    if quiz_type == QuizType.KANJI.value:
        scope = Prompt.ask("Kanji set", choices=["all", "jlpt", "grade"], default="jlpt")
        if scope == "jlpt":
            jlpt_level = int(Prompt.ask("JLPT level (N)", choices=[str(n) for n in JLPT_LEVELS], default="5"))
        elif scope == "grade":
            kanji_grade = int(Prompt.ask("Grade", choices=[str(g) for g in KANJI_GRADES], default="1"))
    try:
        configure(session, quiz_type, modes[mode_index - 1], jlpt_level=jlpt_level, kanji_grade=kanji_grade)
    except InvalidConfiguration as e:
        console.print(f"[red]{e}[/red]")
        return
    _load(session, client, workers)


def cmd_stats(session: QuizSession):
    summary = get_session_summary(session)
    color = get_accuracy_color(summary["accuracy"])
    table = Table(title="Quiz Stats")
    table.add_column("Correct", justify="right", style="green")
    table.add_column("Incorrect", justify="right", style="red")
    table.add_column("Total", justify="right")
    table.add_column("Accuracy", justify="right")
    table.add_row(
        str(summary["correct"]), str(summary["incorrect"]), str(summary["total"]),
        f"[{color}]{summary['accuracy']}%[/{color}]",
    )
    console.print(table)

    bar_filled = int(summary["progress"] / 5)
    bar = f"[cyan]{'█' * bar_filled}{'░' * (20 - bar_filled)}[/cyan]"
    console.print(
        f"\n  Progress: [bold]{summary['used']}/{summary['available']}[/bold] {bar} {summary['progress']}%"
    )
    used = session.deck.used
    if used:
        console.print(f"  [dim]Recent: {' '.join(used[-10:])}[/dim]")


def cmd_chat(chat: ChatService):
    if not has_chat_config(chat.settings):
        console.print("[yellow]Set GEMINI_API_KEY to use the vocabulary assistant.[/yellow]")
        return
    console.print(Panel(
        "Ask about Japanese words, kanji or grammar. [dim]Type q to leave.[/dim]",
        title="Vocabulary Assistant", border_style="magenta",
    ))
    while True:
        message = session_prompt("[bold]You[/bold]")
        if not message.strip():
            continue
        with console.status("Thinking..."):
            text = chat.reply(message)
        console.print(Panel(text, border_style="magenta"))


def cmd_cache(client: KanjiClient):
    if not client.cache_path:
        console.print("[yellow]Cache is disabled.[/yellow]")
        return
    info = get_cache_info(client.cache_path)
    table = Table(title=f"Kanji Cache: {info['total_items']} items, {info['total_size']}")
    table.add_column("Key", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Age", justify="right")
    for item in info["items"][:20]:
        table.add_row(item["key"], item["size"], item["age"])
    console.print(table)
    if info["total_items"] and Prompt.ask("Clear cache?", choices=["y", "n"], default="n") == "y":
        removed = clear_cache(client.cache_path)
        console.print(f"[green]Removed {removed} entries.[/green]")


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    client = KanjiClient(settings=settings)
    chat = ChatService(settings)
    session = QuizSession()
    workers = settings.fetch_workers

    show_welcome()
    _load(session, client, workers)

    while True:
        show_menu(session)
        choice = Prompt.ask("\n[bold]>[/bold]", default="quiz").strip().lower()
        try:
            if choice == "quiz":
                run_quiz_session(session)
            elif choice == "settings":
                cmd_settings(session, client, workers)
            elif choice == "stats":
                cmd_stats(session)
            elif choice == "reset":
                reset_stats(session)
                console.print("[green]Score reset.[/green]")
            elif choice == "restart":
                with console.status("Loading characters..."):
                    restart(session, client, workers)
                console.print("[green]New quiz ready.[/green]")
            elif choice == "chat":
                cmd_chat(chat)
            elif choice == "cache":
                cmd_cache(client)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]またね![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Back to menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
