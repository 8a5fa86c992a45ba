# Tailwind class names used by the preview renderer

TEXT_ALIGNMENT = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
    "justify": "text-justify",
}

FONT_SIZE = {
    "sm": "text-sm",
    "base": "text-base",
    "lg": "text-lg",
    "xl": "text-xl",
}

FONT_FAMILY = {
    "inter": "font-sans",
    "serif": "font-serif",
    "sans": "font-sans",
    "mono": "font-mono",
}

LINE_HEIGHT = {
    "tight": "leading-tight",
    "snug": "leading-snug",
    "normal": "leading-normal",
    "relaxed": "leading-relaxed",
    "loose": "leading-loose",
}

FONT_WEIGHT = {
    "normal": "font-normal",
    "medium": "font-medium",
    "semibold": "font-semibold",
    "bold": "font-bold",
}

GRID_COLUMNS = {
    1: "grid-cols-1",
    2: "grid-cols-2",
    3: "grid-cols-3",
    4: "grid-cols-4",
    5: "grid-cols-5",
    6: "grid-cols-6",
}

GAP = {
    "sm": "gap-2",
    "md": "gap-4",
    "lg": "gap-6",
}

SOCIAL_POSITION = {
    "bottom-right": "bottom-4 right-4",
    "bottom-left": "bottom-4 left-4",
    "top-right": "top-4 right-4",
    "top-left": "top-4 left-4",
}

SOCIAL_STYLE = {
    "glass": "bg-white/20 backdrop-blur-sm hover:bg-white/30",
    "solid": "bg-white hover:bg-gray-100",
    "outline": "bg-transparent border border-white/50 hover:bg-white/10",
}

BREADCRUMB_TEXT_SIZE = {
    "sm": "text-sm",
    "base": "text-base",
    "lg": "text-lg",
}

BREADCRUMB_COLOR = {
    "gray": "text-gray-500 hover:text-gray-700",
    "blue": "text-blue-500 hover:text-blue-700",
    "black": "text-gray-900 hover:text-gray-700",
}
