"""The start-up banner."""

from __future__ import annotations

from endkrypter.console import Console

_LOGO = r"""         /     /  // --- /   / --- /   / --- /   / --- /   / --- //  /     /
        /     /  // /O/ /   / /L/ /   / /R/ /   / /S/ /   / /X/ //  /     /
       /     /  // --- /   / --- /   / --- /   / --- /   / --- //  /     /
      /     /  //     /   /     /   /     /   /     /   /     //  /     /
     |     |  || --- |   | --- |   | --- |   | --- |   | --- ||  |     |
     |     |  || |N| |   | |K| |   | |Q| |   | |R| |   | |W| ||  |     |
     |     |  || --- |   | --- |   | --- |   | --- |   | --- ||  |     |
     |     |  || --- |   | --- |   | --- |   | --- |   | --- ||  |     |
     |-----|  || |M| |---| |J| |---| |P| |---| |Q| |---| |V| ||  |-----|
     |     |  || --- |   | --- |   | --- |   | --- |   | --- ||  |     |
    /|     |  || --- |   | --- |   | --- |   | --- |   | --- ||  |     |
   / |     |  || |L| |   | |I| |   | |O| |   | |P| |   | |U| ||  |     |   /            --- EndKrypter ---
  /_______________________________________________________________________/             --- Version : 0.2
 |         _____________________________________________________         |\            --- Release : 05-09-2024
 |        / .-.   .-.   .-.   .-.   .-.   .-.   .-.   .-.   .-  \        | \           --- 8 Different Encryption methods
 |       | ( Q ) ( W ) ( E ) ( R ) ( T ) ( Y ) ( U ) ( I ) ( O ) |       |             ---------------------------------
 |       |  "-"."-"."-"."-"."-"."-"."-"."-"."-"."-"  |       |
 |O      |    ( A ) ( S ) ( D ) ( F ) ( G ) ( H ) ( J ) ( K )    |      O|             [+] USAGE [+]
 |       |  .-"."-"."-"."-"."-"."-"."-"."-"."-"."-"  |       |             --- Communication Security ---
 |       | ( Z ) ( X ) ( C ) ( V ) ( B ) ( N ) ( M ) ( P ) ( L ) |       |             --- File Protection ---
 |        \ "-"   "-"   "-"   "-"   "-"   "-"   "-"   "-" /        |             --- Educational Tool ---
 |         -----------------------------------------------------         |             --------------------------------------
 |___  .-. __ .-. __ .-. __ .-. __ .-. __ .-. __ .-. __ .-. __ .-. ______|
  \   / 1 \  / 2 \  / 3 \  / 4 \  / 5 \  / 6 \  / 7 \  / 8 \  / 9 \       \  |
  |\  \ Q /  \ W /  \ E /  \ R /  \ T /  \ Y /  \ U /  \ I /  \ O /        \ |
  |--- "-"    "-"    "-"    "-"    "-"    "-"    "-"    "-"  ---------|             [+] ABOUT [+]
  |       |      |      |      |      |      |      |      |      |          |      --- Made for strict educational purposes
  |----  .-.    .-.    .-.    .-.    .-.    .-.    .-.    .-.    .-. --------|      --------------------------------------
        / @ \  / $ \  / % \  / ! \  / _ \  / * \  / / \  / - \  / # \
        \ A /  \ S /  \ D /  \ F /  \ G /  \ H /  \ J /  \ K /  \ L /
         "-"    "-"    "-"    "-"    "-"    "-"    "-"    "-"
            |      |      |      |      |      |      |      |
           .-.    .-.    .-.    .-.    .-.    .-.    .-.    .-.
          / ( \  / ) \  / ? \  / ' \  / " \  / : \  / ; \  / 0 \
          \ Z /  \ X /  \ C /  \ V /  \ B /  \ N /  \ M /  \ P /
           "-"    "-"    "-"    "-"    "-"    "-"    "-"    "-"
"""


def logo_text() -> str:
    """Return the banner art with its information panel."""
    return _LOGO


def print_logo(console: Console) -> None:
    """Show the banner, wait for Enter, then clear the screen."""
    console.write(f"\n\n\n{logo_text()}\n")
    console.write("Press Enter to continue...")
    console.wait_for_enter()
    console.clear()