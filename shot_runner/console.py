from rich.console import Console

console = Console(stderr=True)
console.quiet = True
