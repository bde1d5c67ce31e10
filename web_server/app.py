#!/usr/bin/env python3
"""
回归图表 Web服务器
在浏览器中展示可缩放、可悬停、可导出的回归散点图
"""

import io
import math
from datetime import datetime

from flask import Flask, render_template, jsonify, request, send_file

from regviz.config.system import SystemConfig
from regviz.session import ChartSession
from regviz.utils.exceptions import StaleGenerationError
from regviz.utils.logger import LoggerManager

app = Flask(__name__)

system_config = SystemConfig()
chart_session = ChartSession.from_config(system_config)
logger = LoggerManager.get_logger("WebServer")


class PayloadError(ValueError):
    """请求参数无效"""
    pass


def read_numbers(*names):
    """从JSON请求体读取有限数值参数"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise PayloadError("请求体必须是JSON对象")

    values = []
    for name in names:
        value = payload.get(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise PayloadError(f"参数 '{name}' 必须是有限数值")
        values.append(float(value))
    return values


@app.errorhandler(PayloadError)
def handle_payload_error(error):
    return jsonify({"error": str(error)}), 400


@app.route('/')
def index():
    """首页：图表、按钮与统计面板"""
    layout = chart_session.renderer.layout
    return render_template('index.html', width=int(layout.width), height=int(layout.height))


@app.route('/api/state')
def api_state():
    """API: 当前状态（统计、提示、缩放）"""
    return jsonify(chart_session.state.to_dict())


@app.route('/api/generate', methods=['POST'])
def api_generate():
    """API: 生成新样本"""
    state = chart_session.generate()
    return jsonify(state.to_dict())


@app.route('/api/scene')
def api_scene():
    """API: 指定动画代号的当前帧，代号过期时返回409"""
    generation = request.args.get('generation', type=int)
    if generation is None:
        generation = chart_session.state.generation

    try:
        scene = chart_session.frame(generation)
    except StaleGenerationError as e:
        return jsonify({"stale": True, "generation": e.current}), 409

    return jsonify(scene.to_dict())


@app.route('/api/pointer', methods=['POST'])
def api_pointer():
    """API: 指针移动，返回提示状态"""
    x, y, client_x, client_y = read_numbers('x', 'y', 'client_x', 'client_y')
    tooltip = chart_session.pointer_move(x, y, client_x, client_y)
    return jsonify(tooltip.to_dict())


@app.route('/api/pointer/leave', methods=['POST'])
def api_pointer_leave():
    """API: 指针离开图表"""
    return jsonify(chart_session.pointer_leave().to_dict())


@app.route('/api/zoom', methods=['POST'])
def api_zoom():
    """API: 以锚点缩放"""
    factor, x, y = read_numbers('factor', 'x', 'y')
    if factor <= 0:
        raise PayloadError("参数 'factor' 必须为正数")
    return jsonify(chart_session.zoom_by(factor, x, y).to_dict())


@app.route('/api/pan', methods=['POST'])
def api_pan():
    """API: 平移"""
    dx, dy = read_numbers('dx', 'dy')
    return jsonify(chart_session.pan_by(dx, dy).to_dict())


@app.route('/api/zoom/reset', methods=['POST'])
def api_zoom_reset():
    return jsonify(chart_session.reset_zoom().to_dict())


@app.route('/api/export', methods=['POST'])
def api_export():
    """API: 导出当前图表为PNG，失败时返回409和错误信息"""
    result = chart_session.export()
    if not result.success:
        return jsonify(result.to_dict()), 409

    return send_file(io.BytesIO(result.data), mimetype=result.mimetype,
                     as_attachment=True, download_name=result.filename)


@app.route('/health')
def health_check():
    """健康检查端点"""
    return jsonify({"status": "healthy", "timestamp": datetime.now().isoformat()})


if __name__ == '__main__':
    server_config = system_config.get_web_server_config()
    host = server_config.get('host', '127.0.0.1')
    port = server_config.get('port', 9998)

    logger.info(f"启动回归图表Web服务器: http://{host}:{port}")
    app.run(host=host, port=port, debug=server_config.get('debug', False))
