from block_dodger.ui.curses import windows, draw_field

__all__ = ['windows', 'draw_field']
